"""Adapter: making incompatible interfaces collaborate."""

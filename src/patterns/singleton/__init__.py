"""Singleton: one instance per class."""

"""Decorator: behaviour added by wrapping."""

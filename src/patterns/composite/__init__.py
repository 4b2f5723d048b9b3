"""Composite: trees of objects treated uniformly."""

"""Flyweight: shared intrinsic state."""

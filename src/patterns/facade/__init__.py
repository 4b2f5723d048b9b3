"""Facade: a simple front for a complex subsystem."""

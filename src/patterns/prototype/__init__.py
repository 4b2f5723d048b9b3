"""Prototype: cloning objects."""

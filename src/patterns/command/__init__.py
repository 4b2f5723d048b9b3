"""Command: requests as objects."""

"""Memento: snapshots and undo."""

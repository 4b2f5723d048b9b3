"""Interpreter: evaluating a tiny boolean language."""

"""Core contracts.

Why:
- `Protocol`s the runner relies on instead of concrete example modules.
"""

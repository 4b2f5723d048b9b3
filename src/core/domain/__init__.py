"""Domain models for the catalog.

Why:
- Pure, strict data structures (Pydantic v2) and the pattern taxonomy.
- The domain knows nothing about the CLI, HTTP or report formats.
"""

"""Contract of an example module.

Why a Protocol:
- Example modules are plain scripts; anything with a callable `main` can be
  run by the catalogue without inheriting from a base class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PatternExample(Protocol):
    """Minimal surface the runner needs from an example module."""

    def main(self) -> None:
        """Run the demonstration, printing to stdout."""

        ...

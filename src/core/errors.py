"""Catalogue exceptions.

Errors raised *by* the examples to illustrate a pattern constraint live in
their own modules; this module only covers the catalogue machinery.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from core.domain.models import ExampleRun


class CatalogError(Exception):
    """Base class for catalogue errors."""


class UnknownPatternError(CatalogError, LookupError):
    def __init__(self, name: str, suggestions: Sequence[str] = ()) -> None:
        self.name = name
        self.suggestions = list(suggestions)
        message = f"Unknown pattern: {name!r}"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(message)


class UnknownVariantError(CatalogError, LookupError):
    def __init__(self, variant: str, available: Sequence[str] = ()) -> None:
        self.variant = variant
        self.available = list(available)
        message = f"Unknown variant: {variant!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ExampleLoadError(CatalogError):
    """The example module cannot be imported or has no `main()`."""


class ExampleFailedError(CatalogError):
    """An example raised while running. The partial run is attached."""

    def __init__(self, run: "ExampleRun") -> None:
        self.run = run
        super().__init__(f"{run.pattern}/{run.variant.value} failed: {run.error}")

"""Pattern taxonomy shared by the catalogue, the runner and the CLI.

Kept in the domain layer so CLI and services share one source of truth
without importing each other.
"""

from __future__ import annotations

from enum import Enum

from core.errors import UnknownVariantError


class Category(str, Enum):
    """Gang-of-Four pattern families."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    def label(self) -> str:
        return self.value.capitalize()


_VARIANT_ALIASES: dict[str, str] = {
    "conceptual": "conceptual",
    "structural": "conceptual",
    "structure": "conceptual",
    "realworld": "real_world",
    "reallife": "real_world",
}


class Variant(str, Enum):
    """Flavours in which each pattern is demonstrated."""

    CONCEPTUAL = "conceptual"
    REAL_WORLD = "real_world"

    @classmethod
    def default(cls) -> "Variant":
        return cls.CONCEPTUAL

    @classmethod
    def parse(cls, text: str | "Variant") -> "Variant":
        """Accept `real-world`, `RealWorld`, `Structural`, ... case-insensitively."""

        if isinstance(text, cls):
            return text
        key = str(text).strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        canonical = _VARIANT_ALIASES.get(key)
        if canonical is None:
            raise UnknownVariantError(str(text), [v.value for v in cls])
        return cls(canonical)

    def label(self) -> str:
        return "Real world" if self is Variant.REAL_WORLD else "Conceptual"

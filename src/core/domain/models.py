"""Domain models (Pydantic v2).

These describe *what* the catalogue knows about patterns and runs, not how
examples are imported or printed.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.taxonomy import Category, Variant
from core.errors import UnknownVariantError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PatternInfo(BaseModel):
    """A catalogue entry: one design pattern and the variants it ships."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[a-z][a-z0-9_]*$",
        description="Slug, also the package name under `patterns`.",
    )
    title: str = Field(..., min_length=1, description="Human readable name.")
    category: Category
    intent: str = Field(..., min_length=1, description="One-sentence intent.")
    variants: tuple[Variant, ...] = Field(
        default=(Variant.CONCEPTUAL, Variant.REAL_WORLD),
        min_length=1,
    )
    aliases: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("aliases")
    @classmethod
    def _lower_aliases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(a.strip().lower() for a in value if a.strip())

    def has_variant(self, variant: Variant) -> bool:
        return variant in self.variants

    def module_for(self, variant: Variant) -> str:
        """Dotted path of the example module for `variant`."""

        if not self.has_variant(variant):
            raise UnknownVariantError(variant.value, [v.value for v in self.variants])
        return f"patterns.{self.name}.{variant.value}"


class ExampleRun(BaseModel):
    """Result of running one example: captured output plus bookkeeping."""

    pattern: str = Field(..., min_length=1)
    variant: Variant
    module: str = Field(..., min_length=1)
    output: str = Field(default="", description="Everything the example printed.")
    succeeded: bool = True
    error: str | None = Field(
        default=None,
        description="`ExceptionType: message` when the example raised.",
    )
    duration_seconds: float = Field(default=0.0, ge=0.0)
    started_at: datetime = Field(default_factory=_utcnow)

    @property
    def label(self) -> str:
        return f"{self.pattern}/{self.variant.value}"


class CatalogReport(BaseModel):
    """A batch of runs, the unit the exporters serialize."""

    runs: list[ExampleRun] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=_utcnow)

    @property
    def failed(self) -> list[ExampleRun]:
        return [run for run in self.runs if not run.succeeded]

    @property
    def succeeded(self) -> bool:
        return not self.failed

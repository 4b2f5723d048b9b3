from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import CatalogReport, ExampleRun, PatternInfo
from core.domain.taxonomy import Category, Variant
from core.errors import UnknownVariantError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("conceptual", Variant.CONCEPTUAL),
        ("Structural", Variant.CONCEPTUAL),
        ("real_world", Variant.REAL_WORLD),
        ("real-world", Variant.REAL_WORLD),
        ("RealWorld", Variant.REAL_WORLD),
        ("RealLife", Variant.REAL_WORLD),
        (Variant.REAL_WORLD, Variant.REAL_WORLD),
    ],
)
def test_variant_parse_accepts_aliases(text, expected):
    assert Variant.parse(text) is expected


def test_variant_parse_rejects_unknown():
    with pytest.raises(UnknownVariantError) as excinfo:
        Variant.parse("fancy")
    assert excinfo.value.available == ["conceptual", "real_world"]


def test_variant_labels():
    assert Variant.REAL_WORLD.label() == "Real world"
    assert Variant.CONCEPTUAL.label() == "Conceptual"
    assert Category.BEHAVIORAL.label() == "Behavioral"


def test_pattern_info_module_path_and_alias_normalization():
    info = PatternInfo(
        name="observer",
        title="Observer",
        category=Category.BEHAVIORAL,
        intent="Notify.",
        aliases=(" Listener ", ""),
    )
    assert info.aliases == ("listener",)
    assert info.module_for(Variant.REAL_WORLD) == "patterns.observer.real_world"


def test_pattern_info_rejects_missing_variant():
    info = PatternInfo(
        name="interpreter",
        title="Interpreter",
        category=Category.BEHAVIORAL,
        intent="Evaluate.",
        variants=(Variant.REAL_WORLD,),
    )
    assert not info.has_variant(Variant.CONCEPTUAL)
    with pytest.raises(UnknownVariantError):
        info.module_for(Variant.CONCEPTUAL)


def test_pattern_info_name_must_be_a_slug():
    with pytest.raises(ValidationError):
        PatternInfo(name="Bad Name", title="Bad", category=Category.CREATIONAL, intent="x")


def test_pattern_info_is_frozen():
    info = PatternInfo(name="builder", title="Builder", category=Category.CREATIONAL, intent="x")
    with pytest.raises(ValidationError):
        info.title = "Other"


def test_report_failed_and_succeeded():
    ok = ExampleRun(pattern="builder", variant=Variant.CONCEPTUAL, module="patterns.builder.conceptual")
    bad = ExampleRun(
        pattern="state",
        variant=Variant.REAL_WORLD,
        module="patterns.state.real_world",
        succeeded=False,
        error="InvalidStateTransitionError: boom",
    )

    assert CatalogReport(runs=[ok]).succeeded is True
    report = CatalogReport(runs=[ok, bad])
    assert report.succeeded is False
    assert report.failed == [bad]
    assert bad.label == "state/real_world"

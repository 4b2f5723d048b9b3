from __future__ import annotations

import pytest

from core.catalog import CATALOG, get_pattern, iter_examples, list_patterns, normalize_name
from core.domain.taxonomy import Category, Variant
from core.errors import UnknownPatternError
from core.services.example_runner import load_example


def test_catalog_has_every_gof_pattern_once():
    names = [info.name for info in CATALOG]
    assert len(names) == 23
    assert len(set(names)) == 23


def test_categories_split_five_seven_eleven():
    assert len(list_patterns(Category.CREATIONAL)) == 5
    assert len(list_patterns(Category.STRUCTURAL)) == 7
    assert len(list_patterns(Category.BEHAVIORAL)) == 11


@pytest.mark.parametrize(
    "value, expected",
    [
        ("ChainOfResponsibility", "chain_of_responsibility"),
        ("chain-of-responsibility", "chain_of_responsibility"),
        ("Template Method", "template_method"),
        ("  observer ", "observer"),
    ],
)
def test_normalize_name(value, expected):
    assert normalize_name(value) == expected


@pytest.mark.parametrize("name", ["cor", "Chain of Responsibility", "ChainOfResponsibility", "middleware"])
def test_get_pattern_accepts_titles_and_aliases(name):
    assert get_pattern(name).name == "chain_of_responsibility"


def test_unknown_pattern_suggests_close_matches():
    with pytest.raises(UnknownPatternError) as excinfo:
        get_pattern("obsrver")

    assert "observer" in excinfo.value.suggestions
    assert "did you mean" in str(excinfo.value)


def test_unknown_pattern_is_a_lookup_error():
    with pytest.raises(LookupError):
        get_pattern("no-such-pattern")


def test_interpreter_only_ships_real_world():
    info = get_pattern("interpreter")
    assert info.variants == (Variant.REAL_WORLD,)


def test_iter_examples_filters_by_variant_and_category():
    conceptual = list(iter_examples(variant=Variant.CONCEPTUAL))
    real_world = list(iter_examples(variant=Variant.REAL_WORLD))
    assert len(conceptual) == 22
    assert len(real_world) == 23

    structural = list(iter_examples(category=Category.STRUCTURAL))
    assert {info.category for info, _ in structural} == {Category.STRUCTURAL}
    assert len(structural) == 14


@pytest.mark.parametrize(
    "info, variant",
    list(iter_examples()),
    ids=lambda value: getattr(value, "name", getattr(value, "value", str(value))),
)
def test_every_catalog_entry_has_an_importable_example(info, variant):
    module = load_example(info, variant)
    assert callable(module.main)
    assert module.__doc__

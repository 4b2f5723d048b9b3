"""The pattern catalogue.

A static, ordered registry of every pattern and the variants it ships. Example
modules are located by convention (`patterns.<name>.<variant>`) so adding an
example is a matter of adding a module and a `PatternInfo` line.
"""

from __future__ import annotations

import difflib
import re
from typing import Iterator

from core.domain.models import PatternInfo
from core.domain.taxonomy import Category, Variant
from core.errors import UnknownPatternError

CATALOG: tuple[PatternInfo, ...] = (
    # Creational
    PatternInfo(
        name="abstract_factory",
        title="Abstract Factory",
        category=Category.CREATIONAL,
        intent="Produce families of related objects without specifying their concrete classes.",
        aliases=("kit",),
    ),
    PatternInfo(
        name="builder",
        title="Builder",
        category=Category.CREATIONAL,
        intent="Construct complex objects step by step, reusing the same construction code.",
    ),
    PatternInfo(
        name="factory_method",
        title="Factory Method",
        category=Category.CREATIONAL,
        intent="Let subclasses decide which class to instantiate through a creation method.",
        aliases=("virtual_constructor",),
    ),
    PatternInfo(
        name="prototype",
        title="Prototype",
        category=Category.CREATIONAL,
        intent="Copy existing objects without making the code depend on their classes.",
        aliases=("clone",),
    ),
    PatternInfo(
        name="singleton",
        title="Singleton",
        category=Category.CREATIONAL,
        intent="Ensure a class has only one instance and provide a global access point to it.",
    ),
    # Structural
    PatternInfo(
        name="adapter",
        title="Adapter",
        category=Category.STRUCTURAL,
        intent="Let objects with incompatible interfaces collaborate.",
        aliases=("wrapper",),
    ),
    PatternInfo(
        name="bridge",
        title="Bridge",
        category=Category.STRUCTURAL,
        intent="Split an abstraction from its implementation so both can vary independently.",
    ),
    PatternInfo(
        name="composite",
        title="Composite",
        category=Category.STRUCTURAL,
        intent="Compose objects into trees and treat them like individual objects.",
        aliases=("object_tree",),
    ),
    PatternInfo(
        name="decorator",
        title="Decorator",
        category=Category.STRUCTURAL,
        intent="Attach new behaviours to objects by wrapping them in behaviour-carrying wrappers.",
    ),
    PatternInfo(
        name="facade",
        title="Facade",
        category=Category.STRUCTURAL,
        intent="Provide a simplified interface to a complex set of classes.",
    ),
    PatternInfo(
        name="flyweight",
        title="Flyweight",
        category=Category.STRUCTURAL,
        intent="Share common state between many objects to fit more of them in memory.",
        aliases=("cache",),
    ),
    PatternInfo(
        name="proxy",
        title="Proxy",
        category=Category.STRUCTURAL,
        intent="Provide a substitute that controls access to another object.",
    ),
    # Behavioral
    PatternInfo(
        name="chain_of_responsibility",
        title="Chain of Responsibility",
        category=Category.BEHAVIORAL,
        intent="Pass requests along a chain of handlers until one of them handles it.",
        aliases=("cor", "chain", "middleware"),
    ),
    PatternInfo(
        name="command",
        title="Command",
        category=Category.BEHAVIORAL,
        intent="Turn a request into a stand-alone object that can be queued, logged or undone.",
        aliases=("action", "transaction"),
    ),
    PatternInfo(
        name="interpreter",
        title="Interpreter",
        category=Category.BEHAVIORAL,
        intent="Represent a grammar as classes and evaluate sentences of that language.",
        variants=(Variant.REAL_WORLD,),
    ),
    PatternInfo(
        name="iterator",
        title="Iterator",
        category=Category.BEHAVIORAL,
        intent="Traverse a collection without exposing its underlying representation.",
    ),
    PatternInfo(
        name="mediator",
        title="Mediator",
        category=Category.BEHAVIORAL,
        intent="Reduce chaotic dependencies by routing communication through a mediator.",
        aliases=("controller", "intermediary"),
    ),
    PatternInfo(
        name="memento",
        title="Memento",
        category=Category.BEHAVIORAL,
        intent="Save and restore an object's state without revealing its internals.",
        aliases=("snapshot",),
    ),
    PatternInfo(
        name="observer",
        title="Observer",
        category=Category.BEHAVIORAL,
        intent="Notify subscribed objects about events happening to the object they observe.",
        aliases=("event_subscriber", "listener"),
    ),
    PatternInfo(
        name="state",
        title="State",
        category=Category.BEHAVIORAL,
        intent="Let an object change its behaviour when its internal state changes.",
    ),
    PatternInfo(
        name="strategy",
        title="Strategy",
        category=Category.BEHAVIORAL,
        intent="Make a family of algorithms interchangeable behind one interface.",
    ),
    PatternInfo(
        name="template_method",
        title="Template Method",
        category=Category.BEHAVIORAL,
        intent="Define an algorithm's skeleton and let subclasses override specific steps.",
    ),
    PatternInfo(
        name="visitor",
        title="Visitor",
        category=Category.BEHAVIORAL,
        intent="Separate algorithms from the object structure they operate on.",
    ),
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_name(value: str) -> str:
    """`ChainOfResponsibility`, `chain-of-responsibility` -> `chain_of_responsibility`."""

    text = _CAMEL_BOUNDARY.sub("_", value.strip())
    text = re.sub(r"[\s\-]+", "_", text).lower()
    return re.sub(r"_+", "_", text).strip("_")


def _index() -> dict[str, PatternInfo]:
    index: dict[str, PatternInfo] = {}
    for info in CATALOG:
        index[info.name] = info
        index[normalize_name(info.title)] = info
        for alias in info.aliases:
            index[normalize_name(alias)] = info
    return index


_INDEX = _index()


def list_patterns(category: Category | None = None) -> list[PatternInfo]:
    if category is None:
        return list(CATALOG)
    return [info for info in CATALOG if info.category is category]


def get_pattern(name: str) -> PatternInfo:
    key = normalize_name(name)
    info = _INDEX.get(key)
    if info is None:
        suggestions = difflib.get_close_matches(key, [p.name for p in CATALOG], n=3, cutoff=0.6)
        raise UnknownPatternError(name, suggestions)
    return info


def iter_examples(
    *,
    category: Category | None = None,
    variant: Variant | None = None,
) -> Iterator[tuple[PatternInfo, Variant]]:
    for info in list_patterns(category):
        for v in info.variants:
            if variant is None or v is variant:
                yield info, v

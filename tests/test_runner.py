from __future__ import annotations

import sys
import types

import pytest

from core.catalog import get_pattern, iter_examples
from core.config import AppSettings
from core.domain.taxonomy import Category, Variant
from core.errors import ExampleFailedError, ExampleLoadError, UnknownVariantError
from core.services import example_runner
from core.services.example_runner import RunHooks, RunRequest, run_catalog, run_example


def _failing_module(name: str = "patterns.fake.conceptual") -> types.ModuleType:
    module = types.ModuleType(name)

    def main() -> None:
        print("partial output")
        raise RuntimeError("boom")

    module.main = main  # type: ignore[attr-defined]
    return module


def test_run_example_captures_stdout(capsys):
    run = run_example(get_pattern("builder"), Variant.CONCEPTUAL)

    assert run.succeeded
    assert "Product parts: PartA1, PartB1, PartC1" in run.output
    assert run.module == "patterns.builder.conceptual"
    assert run.duration_seconds >= 0
    assert capsys.readouterr().out == ""


def test_run_example_wraps_failures(monkeypatch):
    monkeypatch.setattr(example_runner, "load_example", lambda info, variant: _failing_module())

    with pytest.raises(ExampleFailedError) as excinfo:
        run_example(get_pattern("builder"), Variant.CONCEPTUAL)

    run = excinfo.value.run
    assert run.succeeded is False
    assert run.output == "partial output\n"
    assert run.error == "RuntimeError: boom"


def test_run_example_can_record_failures(monkeypatch):
    monkeypatch.setattr(example_runner, "load_example", lambda info, variant: _failing_module())

    run = run_example(get_pattern("builder"), Variant.CONCEPTUAL, capture_errors=True)

    assert run.succeeded is False
    assert run.error == "RuntimeError: boom"


def test_load_example_rejects_module_without_main(monkeypatch):
    monkeypatch.setitem(sys.modules, "patterns.builder.conceptual", types.ModuleType("patterns.builder.conceptual"))

    with pytest.raises(ExampleLoadError):
        example_runner.load_example(get_pattern("builder"), Variant.CONCEPTUAL)


def test_load_example_wraps_errors_raised_at_import(monkeypatch):
    def broken_import(name):
        raise RuntimeError("boom at import")

    monkeypatch.setattr(example_runner, "importlib", types.SimpleNamespace(import_module=broken_import))

    with pytest.raises(ExampleLoadError, match="boom at import"):
        example_runner.load_example(get_pattern("facade"), Variant.CONCEPTUAL)


def test_run_catalog_records_load_errors(monkeypatch):
    def broken(info, variant):
        raise ExampleLoadError("cannot import")

    monkeypatch.setattr(example_runner, "load_example", broken)
    report = run_catalog(RunRequest(patterns=["facade"]))

    assert len(report.runs) == 2
    assert not report.succeeded
    assert all(run.error == "ExampleLoadError: cannot import" for run in report.runs)


def test_run_catalog_selection_and_hooks():
    started: list[str] = []
    finished: list[str] = []
    hooks = RunHooks(
        example_start=lambda info, variant: started.append(f"{info.name}/{variant.value}"),
        example_done=lambda run: finished.append(run.label),
    )

    report = run_catalog(
        RunRequest(patterns=["observer", "cor"], variants=[Variant.REAL_WORLD]),
        hooks=hooks,
    )

    assert [run.label for run in report.runs] == ["observer/real_world", "chain_of_responsibility/real_world"]
    assert started == finished == ["observer/real_world", "chain_of_responsibility/real_world"]
    assert report.succeeded


def test_run_catalog_category_filter():
    report = run_catalog(RunRequest(category=Category.CREATIONAL, variants=[Variant.CONCEPTUAL]))
    assert {run.pattern for run in report.runs} == {
        "abstract_factory",
        "builder",
        "factory_method",
        "prototype",
        "singleton",
    }


def test_run_catalog_rejects_missing_variant():
    with pytest.raises(UnknownVariantError):
        run_catalog(RunRequest(patterns=["interpreter"], variants=[Variant.CONCEPTUAL]))


def test_settings_reach_the_examples():
    info = get_pattern("chain_of_responsibility")

    strict = run_example(info, Variant.REAL_WORLD, settings=AppSettings(throttle_requests_per_minute=2))
    assert "RequestLimitExceeded" in strict.output

    relaxed = run_example(info, Variant.REAL_WORLD, settings=AppSettings(throttle_requests_per_minute=10))
    assert "RequestLimitExceeded" not in relaxed.output
    assert relaxed.output.count("Server: Authorization has been successful!") == 2


@pytest.mark.parametrize(
    "info, variant",
    list(iter_examples()),
    ids=lambda value: getattr(value, "name", str(value)),
)
def test_every_example_runs_cleanly(info, variant):
    run = run_example(info, variant)
    assert run.succeeded, run.error
    assert run.output.strip()

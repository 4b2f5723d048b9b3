"""Example running utilities.

Importing an example module, capturing what it prints and turning the result
into an `ExampleRun` lives here so the CLI, the doctor and the tests share one
code path and keep presentation (panels, progress) out of the core logic.
"""

from __future__ import annotations

import contextlib
import importlib
import io
import logging
import time
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from types import ModuleType
from typing import Callable, Sequence

from core.catalog import get_pattern, iter_examples
from core.config import AppSettings, use_settings
from core.domain.models import CatalogReport, ExampleRun, PatternInfo
from core.domain.taxonomy import Category, Variant
from core.errors import ExampleFailedError, ExampleLoadError, UnknownVariantError
from core.interfaces.example import PatternExample

logger = logging.getLogger(__name__)


@dataclass
class RunRequest:
    """Selection of examples for a batch run. Empty selections mean "all"."""

    patterns: Sequence[str] | None = None
    variants: Sequence[Variant] | None = None
    category: Category | None = None


@dataclass
class RunHooks:
    """Optional callbacks for UI layers (progress, live output)."""

    example_start: Callable[[PatternInfo, Variant], None] | None = None
    example_done: Callable[[ExampleRun], None] | None = None


def load_example(info: PatternInfo, variant: Variant) -> ModuleType:
    """Import the module behind (`info`, `variant`)."""

    module_name = info.module_for(variant)
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ExampleLoadError(f"Cannot import {module_name}: {exc}") from exc

    if not isinstance(module, PatternExample) or not callable(getattr(module, "main", None)):
        raise ExampleLoadError(f"{module_name} does not define main()")
    return module


def run_example(
    info: PatternInfo,
    variant: Variant,
    *,
    settings: AppSettings | None = None,
    capture_errors: bool = False,
) -> ExampleRun:
    """Run one example and capture its stdout.

    Examples raise named exceptions to illustrate constraints; by default they
    surface as `ExampleFailedError` with the partial output attached. Batch
    runs pass `capture_errors=True` to record the failure instead.
    """

    settings = settings or AppSettings()
    module = load_example(info, variant)

    buffer = io.StringIO()
    started_at = datetime.now(timezone.utc)
    start = time.perf_counter()
    error: str | None = None
    logger.debug("Running %s (offline_http=%s)", module.__name__, settings.offline_http)
    try:
        with use_settings(settings), contextlib.redirect_stdout(buffer):
            module.main()
    except Exception as exc:
        error = f"{type(exc).__name__}: {exc}"
        logger.error("%s failed: %s", module.__name__, error)
        logger.debug("".join(traceback.format_exception(exc)))
        if not capture_errors:
            run = _build_run(info, variant, module, buffer, start, started_at, error)
            raise ExampleFailedError(run) from exc

    run = _build_run(info, variant, module, buffer, start, started_at, error)
    logger.info("%s finished in %.3fs", run.label, run.duration_seconds)
    return run


def _build_run(
    info: PatternInfo,
    variant: Variant,
    module: ModuleType,
    buffer: io.StringIO,
    start: float,
    started_at: datetime,
    error: str | None,
) -> ExampleRun:
    return ExampleRun(
        pattern=info.name,
        variant=variant,
        module=module.__name__,
        output=buffer.getvalue(),
        succeeded=error is None,
        error=error,
        duration_seconds=max(0.0, time.perf_counter() - start),
        started_at=started_at,
    )


def _select(request: RunRequest) -> list[tuple[PatternInfo, Variant]]:
    selection: list[tuple[PatternInfo, Variant]] = []
    wanted = set(request.variants or [])

    if request.patterns:
        infos = [get_pattern(name) for name in request.patterns]
        for info in infos:
            if request.category is not None and info.category is not request.category:
                continue
            variants = [v for v in info.variants if not wanted or v in wanted]
            if wanted and not variants:
                raise UnknownVariantError(
                    ", ".join(sorted(v.value for v in wanted)),
                    [v.value for v in info.variants],
                )
            selection.extend((info, v) for v in variants)
        return selection

    for info, variant in iter_examples(category=request.category):
        if not wanted or variant in wanted:
            selection.append((info, variant))
    return selection


def run_catalog(
    request: RunRequest | None = None,
    *,
    settings: AppSettings | None = None,
    hooks: RunHooks | None = None,
) -> CatalogReport:
    """Run a selection of examples, recording failures instead of raising."""

    request = request or RunRequest()
    settings = settings or AppSettings()
    hooks = hooks or RunHooks()

    report = CatalogReport()
    for info, variant in _select(request):
        if hooks.example_start:
            hooks.example_start(info, variant)
        try:
            run = run_example(info, variant, settings=settings, capture_errors=True)
        except ExampleLoadError as exc:
            run = ExampleRun(
                pattern=info.name,
                variant=variant,
                module=info.module_for(variant),
                succeeded=False,
                error=f"{type(exc).__name__}: {exc}",
            )
        report.runs.append(run)
        if hooks.example_done:
            hooks.example_done(run)

    if report.failed:
        logger.warning("%d of %d examples failed", len(report.failed), len(report.runs))
    return report

"""Command line interface.

Commands stay thin: resolving names, running and exporting are delegated to
`core` and `adapters`; this module only wires options and presentation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html, export_report_pdf_or_html
from cli import doctor
from cli.ui_components import (
    build_pattern_panel,
    build_patterns_table,
    build_run_panel,
    build_summary_table,
    print_banner,
)
from core.catalog import get_pattern, list_patterns
from core.config import AppSettings
from core.domain.models import CatalogReport, ExampleRun, PatternInfo
from core.domain.taxonomy import Category, Variant
from core.errors import CatalogError, ExampleFailedError
from core.logging_setup import configure_logging
from core.services.example_runner import RunHooks, RunRequest, load_example, run_catalog, run_example

app = typer.Typer(no_args_is_help=True, help="Explore and run classic design-pattern examples.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

EXIT_BAD_INPUT = 1
EXIT_EXAMPLE_FAILED = 2


def _fail(message: str, code: int = EXIT_BAD_INPUT) -> typer.Exit:
    _console.print(f"[bold red]Error:[/bold red] {message}")
    return typer.Exit(code=code)


def _resolve(pattern: str) -> PatternInfo:
    try:
        return get_pattern(pattern)
    except CatalogError as exc:
        raise _fail(str(exc)) from exc


def _default_variant(info: PatternInfo) -> Variant:
    default = Variant.default()
    return default if info.has_variant(default) else info.variants[0]


def _export(
    report: CatalogReport,
    *,
    json_path: Path | None,
    html_path: Path | None,
    pdf_path: Path | None,
) -> None:
    if json_path:
        out = export_report_json(report=report, output_path=json_path)
        _console.print(f"[green]JSON saved to:[/green] {out}")
    if html_path:
        out = export_report_html(report=report, output_path=html_path)
        _console.print(f"[green]HTML saved to:[/green] {out}")
    if pdf_path:
        out = export_report_pdf_or_html(report=report, output_path=pdf_path)
        label = "PDF" if out.suffix == ".pdf" else "HTML (PDF unavailable)"
        _console.print(f"[green]{label} saved to:[/green] {out}")


@app.callback()
def _main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override PATTERN_CATALOG_LOG_LEVEL (DEBUG, INFO, ...)."
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    settings = AppSettings()
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise _fail(str(exc)) from exc
    if not no_banner:
        print_banner(_console)


@app.command(name="list")
def list_command(
    category: Optional[Category] = typer.Option(None, "--category", "-c", help="Filter by category."),
) -> None:
    """List the patterns in the catalogue."""

    _console.print(build_patterns_table(list_patterns(category)))


@app.command()
def show(pattern: str = typer.Argument(..., help="Pattern name, e.g. 'observer' or 'ChainOfResponsibility'.")) -> None:
    """Describe a pattern and where its examples live."""

    info = _resolve(pattern)
    summaries: dict[str, str] = {}
    for variant in info.variants:
        try:
            module = load_example(info, variant)
        except CatalogError as exc:
            raise _fail(str(exc)) from exc
        doc = (module.__doc__ or "").strip().splitlines()
        summaries[variant.value] = doc[0] if doc else ""
    _console.print(build_pattern_panel(info, summaries))


@app.command(name="run")
def run_command(
    pattern: str = typer.Argument(..., help="Pattern name."),
    variant: Optional[str] = typer.Option(
        None, "--variant", "-v", help="conceptual (alias: structural) or real_world."
    ),
    all_variants: bool = typer.Option(False, "--all-variants", "-a", help="Run every variant of the pattern."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Export the transcript as JSON."),
    html_path: Optional[Path] = typer.Option(None, "--html", help="Export the transcript as HTML."),
    pdf_path: Optional[Path] = typer.Option(None, "--pdf", help="Export as PDF (falls back to HTML)."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Print raw output without panels."),
) -> None:
    """Run one pattern example and show what it prints."""

    settings = AppSettings()
    info = _resolve(pattern)

    try:
        if all_variants:
            variants = list(info.variants)
        else:
            variants = [Variant.parse(variant) if variant else _default_variant(info)]
        for v in variants:
            info.module_for(v)
    except CatalogError as exc:
        raise _fail(str(exc)) from exc

    runs: list[ExampleRun] = []
    failed = False
    for v in variants:
        try:
            example_run = run_example(info, v, settings=settings)
        except ExampleFailedError as exc:
            example_run = exc.run
            failed = True
        except CatalogError as exc:
            raise _fail(str(exc)) from exc
        runs.append(example_run)
        if quiet:
            typer.echo(example_run.output, nl=False)
            if example_run.error:
                typer.echo(example_run.error, err=True)
        else:
            _console.print(build_run_panel(example_run))

    _export(CatalogReport(runs=runs), json_path=json_path, html_path=html_path, pdf_path=pdf_path)
    if failed:
        raise typer.Exit(code=EXIT_EXAMPLE_FAILED)


@app.command(name="run-all")
def run_all(
    category: Optional[Category] = typer.Option(None, "--category", "-c", help="Only this category."),
    variant: Optional[str] = typer.Option(None, "--variant", "-v", help="Only this variant."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Export the transcript as JSON."),
    html_path: Optional[Path] = typer.Option(None, "--html", help="Export the transcript as HTML."),
    pdf_path: Optional[Path] = typer.Option(None, "--pdf", help="Export as PDF (falls back to HTML)."),
    show_output: bool = typer.Option(False, "--show-output", help="Print each example's output."),
) -> None:
    """Run every example (optionally filtered) and summarize the results."""

    settings = AppSettings()
    try:
        variants = [Variant.parse(variant)] if variant else None
    except CatalogError as exc:
        raise _fail(str(exc)) from exc

    def _done(example_run: ExampleRun) -> None:
        if show_output:
            _console.print(build_run_panel(example_run))
        else:
            status = "[green]OK[/green]" if example_run.succeeded else "[red]FAILED[/red]"
            _console.print(f"{status} {example_run.label}")

    report = run_catalog(
        RunRequest(category=category, variants=variants),
        settings=settings,
        hooks=RunHooks(example_done=_done),
    )
    _console.print(build_summary_table(report))
    _export(report, json_path=json_path, html_path=html_path, pdf_path=pdf_path)

    if report.failed:
        raise typer.Exit(code=EXIT_EXAMPLE_FAILED)


def run() -> None:
    app()

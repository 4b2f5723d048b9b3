"""`doctor`: checks that datasets, the data directory, SQLite, HTTP and PDF export work here."""

from __future__ import annotations

import sqlite3
import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from adapters.report_exporter import export_report_pdf
from core.config import AppSettings, write_user_env_vars
from core.domain.models import CatalogReport
from core.resources_loader import data_dir, get_dataset_path
from core.services.example_runner import run_catalog

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_datasets() -> tuple[bool, str]:
    missing = [name for name in ("cats.csv", "offline_site.json") if get_dataset_path(name) is None]
    if missing:
        return False, f"missing: {', '.join(missing)}"
    return True, "cats.csv, offline_site.json"


def _check_data_dir(settings: AppSettings) -> tuple[bool, str]:
    try:
        path = data_dir(settings)
        marker = path / ".doctor"
        marker.write_text("ok", encoding="utf-8")
        marker.unlink()
        return True, str(path)
    except OSError as exc:
        return False, str(exc)


def _check_sqlite() -> tuple[bool, str]:
    try:
        with sqlite3.connect(":memory:") as conn:
            version = conn.execute("select sqlite_version()").fetchone()[0]
        return True, f"SQLite {version}"
    except sqlite3.Error as exc:
        return False, str(exc)


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    url = "http://example.com/"
    try:
        with build_client(settings) as client:
            response = client.get(url)
        mode = "offline site" if settings.offline_http else "network"
        return response.is_success, f"HTTP {response.status_code} ({mode})"
    except Exception as exc:
        return False, str(exc)


def _check_pdf() -> tuple[bool, str]:
    """Render a one-line report to PDF; WeasyPrint needs native libraries that may be missing."""

    try:
        with tempfile.TemporaryDirectory() as tmp:
            export_report_pdf(report=CatalogReport(), output_path=Path(tmp) / "_doctor_test.pdf")
        return True, "OK"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run(
    skip_examples: bool = typer.Option(False, "--skip-examples", help="Do not smoke-run the examples."),
) -> None:
    """Check the environment the examples run in and suggest fixes."""

    settings = AppSettings()

    table = Table(title="Pattern Catalog Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_data, detail_data = _check_datasets()
    table.add_row("Bundled datasets", "OK" if ok_data else "FAIL", detail_data)

    ok_dir, detail_dir = _check_data_dir(settings)
    table.add_row("Data directory", "OK" if ok_dir else "FAIL", detail_dir)

    ok_sqlite, detail_sqlite = _check_sqlite()
    table.add_row("SQLite", "OK" if ok_sqlite else "FAIL", detail_sqlite)

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP client", "OK" if ok_http else "FAIL", detail_http)

    ok_pdf, detail_pdf = _check_pdf()
    table.add_row("WeasyPrint PDF", "OK" if ok_pdf else "OPTIONAL", detail_pdf)

    failed_examples = 0
    if skip_examples:
        table.add_row("Examples", "SKIPPED", "--skip-examples")
    else:
        report = run_catalog(settings=settings)
        failed_examples = len(report.failed)
        details = f"{len(report.runs) - failed_examples}/{len(report.runs)} ran cleanly"
        if report.failed:
            details += " (failed: " + ", ".join(r.label for r in report.failed) + ")"
        table.add_row("Examples", "OK" if not report.failed else "FAIL", details)

    _console.print(table)

    if not ok_pdf:
        _console.print(
            "\n[yellow]Note:[/yellow] When PDF export fails, `--pdf` automatically falls back to HTML."
        )

    if not (ok_data and ok_dir and ok_sqlite and ok_http) or failed_examples:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()
    data = typer.prompt(
        "Data directory (empty for default)",
        default=str(current.data_dir or ""),
        show_default=True,
    ).strip()
    offline = typer.confirm("Serve example HTTP traffic from the offline site?", default=current.offline_http)
    log_level = typer.prompt("Log level", default=current.log_level, show_default=True).strip().upper()

    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise typer.BadParameter(f"unknown log level: {log_level}")

    values = {
        "PATTERN_CATALOG_OFFLINE_HTTP": "true" if offline else "false",
        "PATTERN_CATALOG_LOG_LEVEL": log_level,
    }
    if data:
        values["PATTERN_CATALOG_DATA_DIR"] = data

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved config to:[/green] {env_path}")

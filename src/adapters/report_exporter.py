"""Report export.

Why it lives in adapters:
- HTML/PDF are infrastructure details (Jinja2/WeasyPrint).
- The core only knows the `CatalogReport` aggregate.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.catalog import CATALOG
from core.domain.models import CatalogReport

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_report_html(*, report: CatalogReport) -> str:
    """Render a self-contained HTML transcript of the runs."""

    generated_at = report.generated_at.astimezone(timezone.utc).isoformat(timespec="seconds")
    generated_at_local = datetime.now().astimezone().isoformat(timespec="seconds")

    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        report_id=generated_at,
        generated_at=generated_at,
        generated_at_local=generated_at_local,
        runs_total=len(report.runs),
        failed_count=len(report.failed),
        titles={info.name: info.title for info in CATALOG},
        categories={info.name: info.category.label() for info in CATALOG},
    )


def export_report_html(*, report: CatalogReport, output_path: Path) -> Path:
    """Export the report as HTML.

    Also the fallback when PDF rendering is not supported by the environment.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_report_html(report=report), encoding="utf-8")
    return output_path


def export_report_pdf(*, report: CatalogReport, output_path: Path) -> Path:
    """Export the report as PDF through WeasyPrint.

    WeasyPrint needs native Pango/Cairo libraries, so it is imported here
    rather than at module load; callers treat `OSError`/`ImportError` as
    "PDF unavailable" and fall back to HTML.
    """

    from weasyprint import HTML  # noqa: PLC0415

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_report_html(report=report)
    HTML(string=html, base_url=str(_TEMPLATES_DIR)).write_pdf(str(output_path))
    logger.info("PDF report written to %s", output_path)
    return output_path


def export_report_pdf_or_html(*, report: CatalogReport, output_path: Path) -> Path:
    """PDF when possible, otherwise HTML next to the requested path."""

    try:
        return export_report_pdf(report=report, output_path=output_path)
    except (ImportError, OSError) as exc:
        fallback = output_path.with_suffix(".html")
        logger.warning("PDF export unavailable (%s); writing HTML to %s", exc, fallback)
        return export_report_html(report=report, output_path=fallback)

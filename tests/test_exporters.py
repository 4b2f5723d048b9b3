from __future__ import annotations

import json

from adapters import report_exporter
from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html, export_report_pdf_or_html, render_report_html
from core.domain.models import CatalogReport, ExampleRun
from core.domain.taxonomy import Variant


def _report() -> CatalogReport:
    return CatalogReport(
        runs=[
            ExampleRun(
                pattern="builder",
                variant=Variant.REAL_WORLD,
                module="patterns.builder.real_world",
                output="SELECT <name> FROM users;\n",
            ),
            ExampleRun(
                pattern="state",
                variant=Variant.CONCEPTUAL,
                module="patterns.state.conceptual",
                succeeded=False,
                error="RuntimeError: boom",
            ),
        ]
    )


def test_export_json_is_stable_and_complete(tmp_path):
    out = export_report_json(report=_report(), output_path=tmp_path / "nested" / "run.json")

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert [run["pattern"] for run in payload["runs"]] == ["builder", "state"]
    assert payload["runs"][0]["variant"] == "real_world"
    assert payload["runs"][1]["error"] == "RuntimeError: boom"


def test_render_html_escapes_output_and_uses_titles():
    html = render_report_html(report=_report())

    assert "Builder &middot; Real world" in html
    assert "SELECT &lt;name&gt; FROM users;" in html
    assert "1 failed" in html
    assert "Behavioral" in html


def test_export_html_writes_file(tmp_path):
    out = export_report_html(report=_report(), output_path=tmp_path / "run.html")
    assert out.read_text(encoding="utf-8").startswith("<!doctype html>")


def test_pdf_falls_back_to_html(tmp_path, monkeypatch):
    def unavailable(**kwargs):
        raise OSError("cannot load library 'pango'")

    monkeypatch.setattr(report_exporter, "export_report_pdf", unavailable)

    out = export_report_pdf_or_html(report=_report(), output_path=tmp_path / "run.pdf")

    assert out == tmp_path / "run.html"
    assert out.exists()

"""JSON export of a catalogue run.

Why JSON:
- Lets other tools diff transcripts between runs or feed them to pipelines.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import CatalogReport


def export_report_json(*, report: CatalogReport, output_path: Path) -> Path:
    """Export `CatalogReport` to UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path

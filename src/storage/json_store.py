"""JSON persistence helpers for analysis reports."""
from __future__ import annotations

import json
from pathlib import Path

from common.models import AnalysisReport, ParseError
from common.report_serialization import report_from_dict, report_to_dict, serialize_parse_error


def save_report(report: AnalysisReport, path: Path) -> None:
    """Serialize an analysis report to JSON, creating parent folders as needed."""

    data = report_to_dict(report)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_report(path: Path) -> AnalysisReport:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    return report_from_dict(data)


def save_parse_error(error: ParseError, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(serialize_parse_error(error), indent=2), encoding="utf-8")

"""Shared AnalysisReport serialization helpers."""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, List

from .models import AnalysisReport, ColumnStats, GroupStats, ParseError
from .versioning import REPORT_ARTIFACT_VERSION


def report_to_dict(report: AnalysisReport) -> Dict[str, object]:
    payload: Dict[str, object] = {
        "version": REPORT_ARTIFACT_VERSION,
        "source": report.source,
        "row_count": report.row_count,
        "header": list(report.header),
        "numeric_columns": list(report.numeric_columns),
        "column_stats": [
            serialize_column_stats(report.column_stats[column])
            for column in report.numeric_columns
            if column in report.column_stats
        ],
    }
    if report.group_column is not None:
        payload["grouping"] = {
            "group_column": report.group_column,
            "value_column": report.value_column,
            "groups": [serialize_group_stats(group) for group in report.groups],
        }
    return payload


def report_from_dict(data: Dict[str, object]) -> AnalysisReport:
    stats_data: List[Dict[str, object]] = data.get("column_stats", [])  # type: ignore[assignment]
    column_stats = {item["column"]: deserialize_column_stats(item) for item in stats_data}
    grouping: Dict[str, object] = data.get("grouping") or {}  # type: ignore[assignment]
    groups_data: List[Dict[str, object]] = grouping.get("groups", [])  # type: ignore[assignment]
    return AnalysisReport(
        source=str(data.get("source", "")),
        row_count=int(data.get("row_count", 0)),
        header=list(data.get("header", [])),
        numeric_columns=list(data.get("numeric_columns", [])),
        column_stats=column_stats,
        group_column=grouping.get("group_column"),
        value_column=grouping.get("value_column"),
        groups=[deserialize_group_stats(item) for item in groups_data],
    )


def serialize_column_stats(stats: ColumnStats) -> Dict[str, object]:
    # Decimals travel as strings so no digits are lost to float conversion.
    return {
        "column": stats.column,
        "count": stats.count,
        "sum": str(stats.total),
        "average": str(stats.average),
        "min": str(stats.minimum),
        "max": str(stats.maximum),
    }


def deserialize_column_stats(data: Dict[str, object]) -> ColumnStats:
    return ColumnStats(
        column=str(data["column"]),
        total=Decimal(str(data["sum"])),
        average=Decimal(str(data["average"])),
        minimum=Decimal(str(data["min"])),
        maximum=Decimal(str(data["max"])),
        count=int(data["count"]),
    )


def serialize_group_stats(group: GroupStats) -> Dict[str, object]:
    return {"key": group.key, "sum": str(group.total), "count": group.count}


def deserialize_group_stats(data: Dict[str, object]) -> GroupStats:
    return GroupStats(key=str(data["key"]), total=Decimal(str(data["sum"])), count=int(data["count"]))


def serialize_parse_error(error: ParseError) -> Dict[str, object]:
    return {"version": REPORT_ARTIFACT_VERSION, "error": error.code.value, "detail": error.detail}

"""Group rows by a key column and total a numeric column per group."""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Sequence

from common.models import GroupStats, Row
from .column_analyzer import DEFAULT_DECIMAL_PRECISION, column_stats

UNKNOWN_GROUP = "Unknown"


def group_key(row: Row, column: str, *, unknown_label: str = UNKNOWN_GROUP) -> str:
    cell = row.get(column)
    if cell is None:
        return unknown_label
    return str(cell)


def partition_rows(
    rows: Sequence[Row],
    column: str,
    *,
    unknown_label: str = UNKNOWN_GROUP,
) -> Dict[str, List[Row]]:
    """Split rows by group key, keeping keys in first-seen order."""

    groups: Dict[str, List[Row]] = {}
    for row in rows:
        groups.setdefault(group_key(row, column, unknown_label=unknown_label), []).append(row)
    return groups


def group_by(
    rows: Sequence[Row],
    group_column: str,
    value_column: str,
    *,
    unknown_label: str = UNKNOWN_GROUP,
    precision: int = DEFAULT_DECIMAL_PRECISION,
) -> List[GroupStats]:
    """Total ``value_column`` per distinct ``group_column`` value.

    Groups without any numeric value are reported with a zero total and count.
    """

    results: List[GroupStats] = []
    for key, members in partition_rows(rows, group_column, unknown_label=unknown_label).items():
        stats = column_stats(members, value_column, precision=precision)
        if stats is None:
            results.append(GroupStats(key=key, total=Decimal(0), count=0))
        else:
            results.append(GroupStats(key=key, total=stats.total, count=stats.count))
    return results

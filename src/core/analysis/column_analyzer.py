"""Numeric column discovery and summary statistics over parsed rows."""
from __future__ import annotations

from decimal import Decimal, localcontext
from itertools import islice
from typing import List, Optional, Sequence

from common.models import ColumnStats, Row, Table

DEFAULT_SAMPLE_ROWS = 5
DEFAULT_DECIMAL_PRECISION = 28


def numeric_columns(table: Table, *, sample_rows: int = DEFAULT_SAMPLE_ROWS) -> List[str]:
    """Return header columns whose sampled values are all integer or decimal.

    Only the first ``sample_rows`` rows are inspected; later rows that break
    the pattern are left for :func:`column_stats` to skip.
    """

    sample = list(islice(table.rows, sample_rows))
    if not sample:
        return []
    return [
        column
        for column in table.header
        if all(_is_numeric_cell(row, column) for row in sample)
    ]


def numeric_values(rows: Sequence[Row], column: str) -> List[Decimal]:
    values: List[Decimal] = []
    for row in rows:
        cell = row.get(column)
        if cell is None:
            continue
        number = cell.as_decimal()
        if number is not None:
            values.append(number)
    return values


def column_stats(
    rows: Sequence[Row],
    column: str,
    *,
    precision: int = DEFAULT_DECIMAL_PRECISION,
) -> Optional[ColumnStats]:
    """Sum, average, min, max and count of the column's numeric values.

    Returns ``None`` when the column holds no numeric value at all.
    """

    values = numeric_values(rows, column)
    if not values:
        return None
    with localcontext() as ctx:
        ctx.prec = precision
        total = sum(values, Decimal(0))
        average = total / len(values)
    return ColumnStats(
        column=column,
        total=total,
        average=average,
        minimum=min(values),
        maximum=max(values),
        count=len(values),
    )


def _is_numeric_cell(row: Row, column: str) -> bool:
    cell = row.get(column)
    return cell is not None and cell.is_numeric

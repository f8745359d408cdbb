from __future__ import annotations

from decimal import Decimal

from common.models import Table
from core.analysis.column_analyzer import column_stats, numeric_columns, numeric_values
from core.parsing.table_parser import parse_table


def _table(*lines: str) -> Table:
    result = parse_table(list(lines))
    assert result.ok, result.error
    return result.table


def test_numeric_columns_in_header_order() -> None:
    table = _table("Name,Qty,Price,When", "bolt,4,0.25,2024-01-01", "nut,10,0.05,2024-01-02")
    assert numeric_columns(table) == ["Qty", "Price"]


def test_sample_only_covers_first_five_rows() -> None:
    lines = ["Item,Price"] + [f"item{idx},{idx}.50" for idx in range(5)] + ["late,n/a"]
    table = _table(*lines)
    assert "Price" in numeric_columns(table)

    stats = column_stats(table.rows, "Price")
    assert stats is not None
    assert stats.count == 5
    assert stats.total == Decimal("12.50")


def test_text_in_sample_disqualifies_column() -> None:
    table = _table("Item,Price", "a,1", "b,unknown", "c,3")
    assert numeric_columns(table) == []


def test_short_row_in_sample_disqualifies_column() -> None:
    table = _table("Item,Price", "a,1", "b")
    assert numeric_columns(table) == []


def test_sample_size_is_configurable() -> None:
    table = _table("Item,Price", "a,1", "b,2", "c,oops")
    assert numeric_columns(table, sample_rows=2) == ["Price"]
    assert numeric_columns(table, sample_rows=3) == []


def test_no_rows_means_no_numeric_columns() -> None:
    assert numeric_columns(_table("A,B")) == []


def test_stats_mix_integers_and_decimals_exactly() -> None:
    table = _table("Label,Amount", "x,0.1", "y,0.2", "z,3")
    stats = column_stats(table.rows, "Amount")
    assert stats.total == Decimal("3.3")
    assert stats.average == Decimal("1.1")
    assert stats.minimum == Decimal("0.1")
    assert stats.maximum == Decimal("3")
    assert stats.count == 3
    assert stats.column == "Amount"


def test_average_uses_decimal_division() -> None:
    table = _table("Label,N", "a,1", "b,2", "c,2")
    stats = column_stats(table.rows, "N")
    assert stats.average == Decimal(5) / Decimal(3)
    assert column_stats(table.rows, "N", precision=5).average == Decimal("1.6667")


def test_stats_absent_without_numeric_values() -> None:
    table = _table("Label,Note", "a,hello", "b,world")
    assert column_stats(table.rows, "Note") is None
    assert column_stats(table.rows, "Missing") is None


def test_timestamps_are_not_numeric_values() -> None:
    table = _table("Label,Mixed", "a,2024-01-01", "b,7")
    assert numeric_values(table.rows, "Mixed") == [Decimal(7)]

from __future__ import annotations

from decimal import Decimal

from common.errors import ErrorCode
from common.models import ValueKind
from core.parsing.table_parser import build_row, parse_table, split_fields


def test_parse_basic_table() -> None:
    result = parse_table(["Name,Age,Score", "Alice,30,88.5", "Bob,45,91"])
    assert result.ok
    table = result.table
    assert table.header == ("Name", "Age", "Score")
    assert table.row_count == 2
    first = table.rows[0]
    assert first["Name"].kind is ValueKind.TEXT
    assert first["Age"].payload == 30
    assert first["Score"].payload == Decimal("88.5")
    assert list(first) == ["Name", "Age", "Score"]


def test_short_row_is_padded_not_dropped() -> None:
    result = parse_table("A,B\n1,2\n3".split("\n"))
    assert result.ok
    rows = result.table.rows
    assert len(rows) == 2
    assert rows[1]["A"].payload == 3
    assert rows[1]["B"].kind is ValueKind.TEXT
    assert rows[1]["B"].payload == ""


def test_long_row_extra_fields_ignored() -> None:
    result = parse_table(["A,B", "1,2,3,4"])
    row = result.table.rows[0]
    assert list(row) == ["A", "B"]
    assert row["B"].payload == 2


def test_empty_input_fails() -> None:
    result = parse_table([])
    assert not result.ok
    assert result.table is None
    assert result.error.code is ErrorCode.EMPTY_INPUT


def test_data_like_header_fails() -> None:
    result = parse_table("10,20\nfoo,bar".split("\n"))
    assert not result.ok
    assert result.error.code is ErrorCode.HEADER_LOOKS_LIKE_DATA
    assert "appears to be data" in result.error.detail


def test_header_only_yields_empty_table() -> None:
    result = parse_table(["A,B"])
    assert result.ok
    assert result.table.rows == ()


def test_line_endings_are_stripped() -> None:
    result = parse_table(["Item,Qty\r\n", "bolt,4\r\n"])
    assert result.table.header == ("Item", "Qty")
    assert result.table.rows[0]["Qty"].payload == 4


def test_duplicate_header_last_value_wins() -> None:
    result = parse_table(["Key,Key,Other", "first,second,x"])
    table = result.table
    assert table.header == ("Key", "Other")
    assert table.rows[0]["Key"].payload == "second"
    assert list(table.rows[0]) == ["Key", "Other"]


def test_reading_failure_becomes_io_error() -> None:
    def broken_lines():
        yield "A,B"
        raise OSError("disk went away")

    result = parse_table(broken_lines())
    assert not result.ok
    assert result.error.code is ErrorCode.IO_ERROR
    assert "disk went away" in result.error.detail


def test_generator_input_is_buffered_for_reuse() -> None:
    result = parse_table(line for line in ["A,B", "1,2", "3,4"])
    rows = result.table.rows
    assert sum(row["A"].payload for row in rows) == 4
    assert sum(row["A"].payload for row in rows) == 4


def test_custom_delimiter() -> None:
    result = parse_table(["A;B", "1;x"], delimiter=";")
    assert result.table.rows[0]["B"].payload == "x"


def test_split_and_build_row_helpers() -> None:
    assert split_fields("a,b,,c\n") == ["a", "b", "", "c"]
    row = build_row(["x", "y", "z"], ["1"])
    assert row["x"].payload == 1
    assert row["y"].payload == ""
    assert row["z"].payload == ""


def test_pivot_header_with_month_names() -> None:
    result = parse_table(["Region,Jan,Feb,Mar", "North,1,2,3"])
    assert result.ok
    assert result.table.header == ("Region", "Jan", "Feb", "Mar")
    assert result.table.rows[0]["Feb"].payload == 2

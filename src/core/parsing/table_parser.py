"""Turn raw delimited lines into a typed, header-keyed table."""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from common.errors import ErrorCode
from common.models import EMPTY_TEXT, ParseResult, Row, Table
from core.headers.type_inference import parse_value
from core.headers.validation import validate_header

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
EMPTY_INPUT_MESSAGE = "CSV input is empty or header is missing."
HEADER_AS_DATA_MESSAGE = "The first line of the CSV appears to be data, not a header."


def split_fields(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Split one line on the delimiter; quoting and escaping are not supported."""

    return line.rstrip("\n\r").split(delimiter)


def build_row(header: Sequence[str], fields: Sequence[str]) -> Row:
    """Pair header columns with parsed fields.

    Missing trailing fields become empty text and surplus fields are dropped.
    """

    cells = []
    for idx, name in enumerate(header):
        value = parse_value(fields[idx]) if idx < len(fields) else EMPTY_TEXT
        cells.append((name, value))
    return Row(cells)


def parse_table(lines: Iterable[str], *, delimiter: str = DEFAULT_DELIMITER) -> ParseResult:
    """Parse every line into a Table, reporting input problems as a failed result."""

    try:
        return _parse_lines(lines, delimiter)
    except Exception as exc:
        logger.debug("Reading CSV input failed", exc_info=True)
        return ParseResult.failure(
            ErrorCode.IO_ERROR,
            f"An error occurred while reading the CSV input: {exc}",
        )


def _parse_lines(lines: Iterable[str], delimiter: str) -> ParseResult:
    buffered = list(lines)
    if not buffered:
        return ParseResult.failure(ErrorCode.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    header_fields = split_fields(buffered[0], delimiter)
    check = validate_header(header_fields)
    if not check.is_header:
        return ParseResult.failure(
            ErrorCode.HEADER_LOOKS_LIKE_DATA,
            f"{HEADER_AS_DATA_MESSAGE} ({check.reason})",
        )

    short_rows = 0
    rows = []
    for line in buffered[1:]:
        fields = split_fields(line, delimiter)
        if len(fields) < len(header_fields):
            short_rows += 1
        rows.append(build_row(header_fields, fields))

    header = tuple(dict.fromkeys(header_fields))
    if len(header) != len(header_fields):
        logger.debug("Duplicate header names collapsed: %s -> %s", header_fields, list(header))
    logger.debug(
        "Parsed %d row(s) across %d column(s); %d short row(s) padded",
        len(rows),
        len(header),
        short_rows,
    )
    return ParseResult.success(Table(header=header, rows=tuple(rows)))

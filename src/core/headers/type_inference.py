"""Per-cell type detection: integer, decimal, timestamp, or text."""
from __future__ import annotations

import re
import warnings
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Final, Optional

from dateutil import parser as date_parser
from dateutil.parser import UnknownTimezoneWarning

from common.models import CellValue, ValueKind

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

# Same bounds as a 96-bit scaled decimal; keeps sums well inside the context range.
DECIMAL_MAX: Final[Decimal] = Decimal("79228162514264337593543950335")
DECIMAL_MIN_EXPONENT: Final[int] = -28

_DEFAULT_A = datetime(2001, 1, 1)
_DEFAULT_B = datetime(2002, 2, 2)

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)


def parse_value(field: str) -> CellValue:
    """Classify a raw field; the first matching kind wins and text always matches."""

    integer = _try_integer(field)
    if integer is not None:
        return CellValue(kind=ValueKind.INTEGER, payload=integer, raw=field)
    decimal = _try_decimal(field)
    if decimal is not None:
        return CellValue(kind=ValueKind.DECIMAL, payload=decimal, raw=field)
    timestamp = _try_timestamp(field)
    if timestamp is not None:
        return CellValue(kind=ValueKind.TIMESTAMP, payload=timestamp, raw=field)
    return CellValue(kind=ValueKind.TEXT, payload=field, raw=field)


def is_data_like(field: str) -> bool:
    """True when a field reads as a number or a date rather than a name."""

    return parse_value(field).kind is not ValueKind.TEXT


def _try_integer(field: str) -> Optional[int]:
    if not _INT_PATTERN.fullmatch(field):
        return None
    number = int(field.strip())
    if number < INT32_MIN or number > INT32_MAX:
        return None
    return number


def _try_decimal(field: str) -> Optional[Decimal]:
    if not _DECIMAL_PATTERN.fullmatch(field):
        return None
    try:
        number = Decimal(field.strip())
    except InvalidOperation:
        return None
    if number.copy_abs() > DECIMAL_MAX:
        return None
    if number and number.adjusted() < DECIMAL_MIN_EXPONENT:
        return None
    return number


def _try_timestamp(field: str) -> Optional[datetime]:
    """Parse a date/time whose year, month and day are all spelled out.

    Two parses against different defaults expose components dateutil filled
    in itself; lone month or weekday names and bare times are rejected.
    """

    with warnings.catch_warnings():
        warnings.simplefilter("error", UnknownTimezoneWarning)
        try:
            first = date_parser.parse(field, default=_DEFAULT_A)
            second = date_parser.parse(field, default=_DEFAULT_B)
        except (ValueError, OverflowError, UnknownTimezoneWarning):
            return None
    if (first.year, first.month, first.day) != (second.year, second.month, second.day):
        return None
    return first

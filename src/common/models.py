"""Data models shared across the CLI, analysis core, and storage layers."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import ErrorCode

Payload = Union[int, Decimal, datetime, str]


class ValueKind(str, Enum):
    INTEGER = "integer"
    DECIMAL = "decimal"
    TIMESTAMP = "timestamp"
    TEXT = "text"


NUMERIC_KINDS = frozenset({ValueKind.INTEGER, ValueKind.DECIMAL})


@dataclass(frozen=True, slots=True)
class CellValue:
    """A classified cell: the detected kind, the decoded payload and the raw field."""

    kind: ValueKind
    payload: Payload
    raw: str = ""

    @property
    def is_numeric(self) -> bool:
        return self.kind in NUMERIC_KINDS

    def as_decimal(self) -> Optional[Decimal]:
        if self.kind is ValueKind.INTEGER:
            return Decimal(self.payload)
        if self.kind is ValueKind.DECIMAL:
            return self.payload  # type: ignore[return-value]
        return None

    def __str__(self) -> str:
        if self.kind in NUMERIC_KINDS:
            return str(self.payload)
        if self.kind is ValueKind.TIMESTAMP:
            return self.payload.isoformat(sep=" ")  # type: ignore[union-attr]
        return self.payload  # type: ignore[return-value]


EMPTY_TEXT = CellValue(kind=ValueKind.TEXT, payload="", raw="")


class Row(Mapping[str, CellValue]):
    """Read-only, header-ordered mapping of column name to cell value.

    Duplicate column names keep the position of their first occurrence and
    the value of their last one.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Sequence[Tuple[str, CellValue]] = ()) -> None:
        store: Dict[str, CellValue] = {}
        for name, value in cells:
            store[name] = value
        self._cells = store

    def __getitem__(self, key: str) -> CellValue:
        return self._cells[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return list(self._cells.items()) == list(other._cells.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._cells.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{name!r}: {str(value)!r}" for name, value in self._cells.items())
        return f"Row({{{inner}}})"


@dataclass(frozen=True, slots=True)
class Table:
    """Header plus every parsed row, buffered for repeated traversal."""

    header: Tuple[str, ...]
    rows: Tuple[Row, ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True, slots=True)
class HeaderCheck:
    is_header: bool
    reason: str
    data_like_count: int = 0
    field_count: int = 0


@dataclass(frozen=True, slots=True)
class ParseError:
    code: ErrorCode
    detail: str

    def __str__(self) -> str:
        return self.detail


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of table parsing: exactly one of ``table`` or ``error`` is set."""

    table: Optional[Table] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, table: Table) -> "ParseResult":
        return cls(table=table)

    @classmethod
    def failure(cls, code: ErrorCode, detail: str) -> "ParseResult":
        return cls(error=ParseError(code=code, detail=detail))


@dataclass(frozen=True, slots=True)
class ColumnStats:
    """Summary statistics over the numeric values of one column."""

    column: str
    total: Decimal
    average: Decimal
    minimum: Decimal
    maximum: Decimal
    count: int


@dataclass(frozen=True, slots=True)
class GroupStats:
    key: str
    total: Decimal
    count: int


@dataclass(slots=True)
class AnalysisReport:
    """Everything the reporting layer needs to render one analysis run."""

    source: str
    row_count: int
    header: List[str] = field(default_factory=list)
    numeric_columns: List[str] = field(default_factory=list)
    column_stats: Dict[str, ColumnStats] = field(default_factory=dict)
    group_column: Optional[str] = None
    value_column: Optional[str] = None
    groups: List[GroupStats] = field(default_factory=list)


@dataclass(slots=True)
class AnalysisOutcome:
    report: Optional[AnalysisReport] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class GlobalSettings:
    """Global knobs that apply across profiles."""

    encoding: str = "utf-8"
    error_policy: str = "fail-fast"  # fail-fast | replace
    delimiter: str = ","


@dataclass(slots=True)
class ProfileSettings:
    """Profile-specific analysis heuristics."""

    description: str
    sample_rows: int = 5
    decimal_precision: int = 28
    unknown_group_label: str = "Unknown"


@dataclass(slots=True)
class RuntimeConfig:
    """Resolved configuration for a single run."""

    global_settings: GlobalSettings
    profile: ProfileSettings

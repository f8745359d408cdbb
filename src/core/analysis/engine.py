"""Chains table parsing, numeric column discovery and grouping into one report."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from common.config import default_runtime_config
from common.models import AnalysisOutcome, AnalysisReport, RuntimeConfig, Table
from core.parsing.table_parser import parse_table
from .column_analyzer import column_stats, numeric_columns
from .grouping import group_by

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Runs the whole analysis for one in-memory set of lines."""

    def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
        self.config = config or default_runtime_config()
        self.delimiter = self.config.global_settings.delimiter
        self.sample_rows = self.config.profile.sample_rows
        self.precision = self.config.profile.decimal_precision
        self.unknown_label = self.config.profile.unknown_group_label

    def analyze(
        self,
        lines: Iterable[str],
        *,
        source: str = "<input>",
        group_column: Optional[str] = None,
        value_column: Optional[str] = None,
    ) -> AnalysisOutcome:
        result = parse_table(lines, delimiter=self.delimiter)
        if not result.ok:
            logger.info("Analysis of %s stopped: %s", source, result.error.detail)
            return AnalysisOutcome(error=result.error)
        report = self.summarize(
            result.table,
            source=source,
            group_column=group_column,
            value_column=value_column,
        )
        return AnalysisOutcome(report=report)

    def summarize(
        self,
        table: Table,
        *,
        source: str = "<input>",
        group_column: Optional[str] = None,
        value_column: Optional[str] = None,
    ) -> AnalysisReport:
        numeric = numeric_columns(table, sample_rows=self.sample_rows)
        report = AnalysisReport(
            source=source,
            row_count=table.row_count,
            header=list(table.header),
            numeric_columns=numeric,
        )
        for column in numeric:
            stats = column_stats(table.rows, column, precision=self.precision)
            if stats is not None:
                report.column_stats[column] = stats

        group_col, value_col = self._grouping_columns(table.header, numeric, group_column, value_column)
        if group_col is not None and value_col is not None:
            report.group_column = group_col
            report.value_column = value_col
            report.groups = group_by(
                table.rows,
                group_col,
                value_col,
                unknown_label=self.unknown_label,
                precision=self.precision,
            )
        logger.info(
            "Analyzed %s: rows=%d numeric_columns=%s groups=%d",
            source,
            report.row_count,
            numeric,
            len(report.groups),
        )
        return report

    @staticmethod
    def _grouping_columns(
        header: Iterable[str],
        numeric: List[str],
        group_column: Optional[str],
        value_column: Optional[str],
    ) -> tuple[Optional[str], Optional[str]]:
        # Default: first header column grouped, first numeric column summed.
        columns = list(header)
        if group_column is None:
            if len(columns) < 2:
                return None, None
            group_column = columns[0]
        if value_column is None:
            if not numeric:
                return None, None
            value_column = numeric[0]
        return group_column, value_column

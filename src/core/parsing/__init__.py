"""Delimited-text table parsing."""

from .table_parser import build_row, parse_table, split_fields

__all__ = ["build_row", "parse_table", "split_fields"]

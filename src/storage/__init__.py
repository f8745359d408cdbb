"""Storage providers for analysis artifacts (JSON)."""

from .json_store import load_report, save_parse_error, save_report

__all__ = [
	"load_report",
	"save_parse_error",
	"save_report",
]

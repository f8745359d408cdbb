"""CLI shell: read a CSV file, analyze it, print the report."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterator, List

from common.config import error_mode_from_policy, load_runtime_config
from common.errors import BackendError
from common.logging_utils import setup_logging
from common.models import AnalysisReport, ParseError, RuntimeConfig
from core.analysis import AnalysisEngine
from storage import save_parse_error, save_report

DEFAULT_INPUT = "data.csv"

logger = logging.getLogger(__name__)


def read_lines(path: Path, runtime: RuntimeConfig) -> Iterator[str]:
    """Yield raw lines lazily so decode failures happen while the core is reading."""

    errors = error_mode_from_policy(runtime.global_settings.error_policy)
    with path.open("r", encoding=runtime.global_settings.encoding, errors=errors, newline="") as handle:
        yield from handle


def render_report(report: AnalysisReport) -> List[str]:
    lines = [
        "Universal Functional Data Analysis",
        "==================================",
        f"File: {report.source}",
        f"Rows: {report.row_count}",
        "",
    ]
    if not report.numeric_columns:
        lines.append("No numeric columns found for analysis.")
        return lines

    lines.append("Numeric Columns Analysis:")
    for column in report.numeric_columns:
        stats = report.column_stats.get(column)
        if stats is None:
            continue
        lines.extend(
            [
                f"  {column}:",
                f"    Count: {stats.count}",
                f"    Sum: {stats.total:.2f}",
                f"    Average: {stats.average:.2f}",
                f"    Min: {stats.minimum:.2f}",
                f"    Max: {stats.maximum:.2f}",
            ]
        )
    lines.append("")

    if report.group_column is not None:
        lines.append(f"Grouped Analysis ({report.value_column} by {report.group_column}):")
        for group in report.groups:
            lines.append(f"  {group.key}: {group.total:.2f} (count: {group.count})")
    return lines


def render_error(error: ParseError) -> str:
    return f"Error: {error.detail}"


def command_analyze(args: argparse.Namespace) -> int:
    config_path = Path(args.config) if args.config else None
    runtime = load_runtime_config(profile=args.profile, config_path=config_path)
    path = Path(args.input)
    if not path.is_file():
        print(f"Error: File '{path}' not found.")
        return 1

    engine = AnalysisEngine(runtime)
    outcome = engine.analyze(
        read_lines(path, runtime),
        source=str(path),
        group_column=args.group_by,
        value_column=args.value_column,
    )
    output_path = Path(args.output) if args.output else None
    if not outcome.ok:
        print(render_error(outcome.error))
        if output_path:
            save_parse_error(outcome.error, output_path)
        return 1

    for line in render_report(outcome.report):
        print(line)
    if output_path:
        save_report(outcome.report, output_path)
        logger.info("Report written to %s", output_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabalyze", description="Schema-free type inference and statistics for CSV files"
    )
    subparsers = parser.add_subparsers(dest="command")

    analyze = subparsers.add_parser("analyze", help="Infer column types and print statistics")
    analyze.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="CSV file to analyze")
    analyze.add_argument(
        "--profile",
        default="default",
        help="Profile from config/defaults.json (e.g., default, thorough)",
    )
    analyze.add_argument(
        "--config",
        help="Alternative configuration JSON document",
    )
    analyze.add_argument(
        "--group-by",
        help="Column to group rows by (defaults to the first column)",
    )
    analyze.add_argument(
        "--value-column",
        help="Numeric column to total per group (defaults to the first numeric column)",
    )
    analyze.add_argument(
        "--output",
        help="Optional path for a JSON copy of the report",
    )
    analyze.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (logs go to stderr)",
    )
    analyze.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored log output",
    )
    analyze.set_defaults(func=command_analyze)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    setup_logging(args.log_level, colorize=not args.no_color)
    try:
        return args.func(args)
    except BackendError as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

"""Console logging setup shared by the CLI entry points."""
from __future__ import annotations

import logging
import sys

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(level: str = "WARNING", *, colorize: bool = True) -> logging.Logger:
    """Attach a single stderr handler to the root logger at the given level."""

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))
    root.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    if colorize:
        handler.setFormatter(
            colorlog.ColoredFormatter(
                "%(log_color)s" + LOG_FORMAT,
                datefmt=DATE_FORMAT,
                log_colors=LOG_COLORS,
            )
        )
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    return root

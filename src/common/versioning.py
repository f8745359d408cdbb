"""Centralized version constants for written artifacts."""
from __future__ import annotations

REPORT_ARTIFACT_VERSION = "1.0.0"

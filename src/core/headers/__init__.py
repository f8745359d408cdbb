"""Cell type detection and header validation helpers."""

from .type_inference import is_data_like, parse_value
from .validation import validate_header

__all__ = ["is_data_like", "parse_value", "validate_header"]

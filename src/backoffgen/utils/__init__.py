r"""Utility functions for option parsing, validation and logging."""

from __future__ import annotations

__all__ = [
    "MAX_DELAY",
    "StructuredFormatter",
    "log_structured",
    "parse_float",
    "parse_int",
    "validate_no_bounds",
    "validate_sequence",
]

from backoffgen.utils.parsing import parse_float, parse_int
from backoffgen.utils.structured_logging import StructuredFormatter, log_structured
from backoffgen.utils.validation import MAX_DELAY, validate_no_bounds, validate_sequence

r"""Permissive numeric parsing for backoff options.

Tunable options are accepted from loosely typed sources such as
environment variables or configuration files. Values that cannot be
read as a number are reported as ``None`` so the caller can fall back
to a default.
"""

from __future__ import annotations

__all__ = ["parse_float", "parse_int"]

import math
import re
from typing import Any

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")


def parse_int(value: Any) -> int | None:
    """Parse a value as an integer, or return ``None``.

    Integers are returned as is, finite floats are truncated toward
    zero and strings are read from their leading digits. Booleans are
    rejected.

    Args:
        value: The value to parse.

    Returns:
        The parsed integer, or ``None`` if the value is not numeric.

    Example:
        ```pycon
        >>> from backoffgen.utils.parsing import parse_int
        >>> parse_int(42)
        42
        >>> parse_int(12.9)
        12
        >>> parse_int("250ms")
        250
        >>> parse_int("fast") is None
        True

        ```
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _INT_PATTERN.match(value)
        if match is None:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # Longer than the interpreter digit limit
            return None
    return None


def parse_float(value: Any) -> float | None:
    """Parse a value as a float, or return ``None``.

    Args:
        value: The value to parse. Strings are read from their leading
            decimal literal.

    Returns:
        The parsed float, or ``None`` if the value is not numeric or
        is NaN.

    Example:
        ```pycon
        >>> from backoffgen.utils.parsing import parse_float
        >>> parse_float("0.25")
        0.25
        >>> parse_float(3)
        3.0
        >>> parse_float(None) is None
        True

        ```
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PATTERN.match(value)
        if match is None:
            return None
        result = float(match.group(1).replace("Infinity", "inf"))
    else:
        return None
    return None if math.isnan(result) else result

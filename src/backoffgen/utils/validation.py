r"""Validation utilities for options that must be rejected outright.

Most backoff options degrade to their defaults when invalid. The
helpers in this module cover the exceptions to that rule and raise
``BackoffConfigError`` at construction time.
"""

from __future__ import annotations

__all__ = ["MAX_DELAY", "SEQUENCE_ERROR", "validate_no_bounds", "validate_sequence"]

from typing import TYPE_CHECKING, Any

from backoffgen.exceptions import BackoffConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

SEQUENCE_ERROR = (
    "FixedBackoff: `sequence` is required, and must be an array of one or more integers >= 0"
)

# Largest delay that converts to a float exactly
MAX_DELAY = 2**53


def _as_delay(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= MAX_DELAY else None
    if isinstance(value, float) and value.is_integer():
        return _as_delay(int(value))
    return None


def validate_sequence(sequence: Any) -> tuple[int, ...]:
    """Validate an explicit delay sequence.

    Args:
        sequence: The candidate sequence. It must be a ``list`` or
            ``tuple`` holding at least one non-negative integer.
            Integral floats such as ``3.0`` are accepted.

    Returns:
        The sequence as a tuple of ``int``.

    Raises:
        BackoffConfigError: If the sequence is missing, is not a list
            or tuple, is empty, or holds any value that is not a
            non-negative integer up to ``MAX_DELAY``.

    Example:
        ```pycon
        >>> from backoffgen.utils.validation import validate_sequence
        >>> validate_sequence([0, 3, 10])
        (0, 3, 10)
        >>> validate_sequence([1, -1])  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        backoffgen.exceptions.BackoffConfigError: FixedBackoff: `sequence` is required, ...

        ```
    """
    if not isinstance(sequence, (list, tuple)) or not sequence:
        raise BackoffConfigError(SEQUENCE_ERROR, option="sequence")
    delays = []
    for value in sequence:
        delay = _as_delay(value)
        if delay is None:
            raise BackoffConfigError(SEQUENCE_ERROR, option="sequence")
        delays.append(delay)
    return tuple(delays)


def validate_no_bounds(options: Iterable[str]) -> None:
    """Reject delay bounds for a strategy that defines its own.

    Args:
        options: The names of the options passed by the caller.

    Raises:
        BackoffConfigError: If ``min_delay`` or ``max_delay`` is among
            the options, whatever its value.

    Example:
        ```pycon
        >>> from backoffgen.utils.validation import validate_no_bounds
        >>> validate_no_bounds(["jitter"])
        >>> validate_no_bounds(["max_delay"])  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        backoffgen.exceptions.BackoffConfigError: FixedBackoff: `max_delay` is invalid for this strategy

        ```
    """
    names = set(options)
    for option in ("min_delay", "max_delay"):
        if option in names:
            msg = f"FixedBackoff: `{option}` is invalid for this strategy"
            raise BackoffConfigError(msg, option=option)

r"""Exceptions raised when a backoff generator cannot be configured."""

from __future__ import annotations

__all__ = ["BackoffConfigError"]


class BackoffConfigError(ValueError):
    """Raised when a backoff generator receives an unusable
    configuration.

    Only structurally required options are validated strictly (for
    example the sequence of a fixed backoff). Tunable numeric options
    such as ``step`` or ``factor`` never raise and fall back to their
    defaults instead.

    Args:
        message: A description of the problem.
        option: The name of the offending option, if any.

    Example:
        ```pycon
        >>> from backoffgen.exceptions import BackoffConfigError
        >>> exc = BackoffConfigError("FixedBackoff: `min_delay` is invalid", option="min_delay")
        >>> exc.option
        'min_delay'
        >>> isinstance(exc, ValueError)
        True

        ```
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.option = option

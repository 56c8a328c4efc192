r"""Structured logging utilities for machine-readable log output.

The generators log every emitted delay at ``DEBUG`` level with extra
fields (strategy, delay, spread). Those fields are ignored by the usual
text formatters and show up as JSON keys with ``StructuredFormatter``.

Example:
    Enable structured logging for backoffgen:

    ```python
    import logging
    from backoffgen.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("backoffgen")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```
"""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

import json
import logging
import time
from typing import Any

# Attributes set on every LogRecord, excluded from the extra fields
_RESERVED_ATTRIBUTES = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "msecs",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "sinfo",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
    }
)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes one JSON object with the fields ``timestamp``,
    ``level``, ``logger``, ``message``, ``module``, ``function`` and
    ``line``, plus any field passed through ``extra``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from backoffgen.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Next delay", extra={"delay": 40})
        >>> json.loads(stream.getvalue())["delay"]
        40

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRIBUTES:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record timestamp as ISO 8601 UTC with
        milliseconds."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    The level is checked first, so a disabled logger costs a single
    comparison.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Log message.
        **extra: Additional structured fields to include in the record.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)

r"""backoffgen - Generators of successive retry delays.

This package computes the delays a retry loop waits between attempts
at a failing operation. It never sleeps and never performs I/O: the
caller asks for the next delay and does the waiting itself.

Key Features:
    - Linear, exponential, Fibonacci and fixed-sequence strategies
    - Optional jitter to spread out retries from many callers
    - Delays clamped to a configurable upper bound
    - Permissive option parsing with sensible defaults

Example:
    ```pycon
    >>> from backoffgen import ExponentialBackoff
    >>> backoff = ExponentialBackoff(min_delay=100, max_delay=1000)
    >>> [backoff.next() for _ in range(6)]
    [100, 200, 400, 800, 1000, 1000]
    >>> backoff.reset()
    >>> backoff.next()
    100

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_FACTOR",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MIN_DELAY",
    "DEFAULT_STEP",
    "Backoff",
    "BackoffConfig",
    "BackoffConfigError",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "FixedBackoff",
    "LinearBackoff",
    "__version__",
    "create_backoff",
]

from importlib.metadata import PackageNotFoundError, version

from backoffgen.backoff import (
    ExponentialBackoff,
    FibonacciBackoff,
    FixedBackoff,
    LinearBackoff,
    create_backoff,
)
from backoffgen.config import (
    DEFAULT_FACTOR,
    DEFAULT_MAX_DELAY,
    DEFAULT_MIN_DELAY,
    DEFAULT_STEP,
    BackoffConfig,
)
from backoffgen.exceptions import BackoffConfigError
from backoffgen.generator import Backoff

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

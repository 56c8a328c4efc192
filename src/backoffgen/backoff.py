r"""Ready-made backoff generators.

Each class normalizes its options once, picks its strategy and hands
both to ``Backoff``. Invalid tunable options fall back to their
defaults; only the sequence of ``FixedBackoff`` (and its lack of
bounds) is enforced.
"""

from __future__ import annotations

__all__ = [
    "ExponentialBackoff",
    "FibonacciBackoff",
    "FixedBackoff",
    "LinearBackoff",
    "create_backoff",
]

from typing import Any

from backoffgen.config import BackoffConfig, normalize_factor, normalize_step
from backoffgen.exceptions import BackoffConfigError
from backoffgen.generator import Backoff
from backoffgen.strategy import (
    ExponentialStrategy,
    FibonacciStrategy,
    FixedStrategy,
    LinearStrategy,
)
from backoffgen.utils.validation import validate_no_bounds


class LinearBackoff(Backoff):
    """Linear backoff generator.

    Args:
        min_delay: First delay and lower bound (default: 10).
        max_delay: Upper bound (default: 10000).
        jitter: Jitter fraction in ``(0, 1]`` (default: disabled).
        step: Increment between delays, ``> 0`` (default: 50).

    Example:
        ```pycon
        >>> from backoffgen import LinearBackoff
        >>> backoff = LinearBackoff(min_delay=0, max_delay=50, step=10)
        >>> [backoff.next() for _ in range(7)]
        [0, 10, 20, 30, 40, 50, 50]

        ```
    """

    def __init__(
        self,
        min_delay: Any = None,
        max_delay: Any = None,
        jitter: Any = None,
        step: Any = None,
    ) -> None:
        super().__init__(
            LinearStrategy(step=normalize_step(step)),
            BackoffConfig.from_options(min_delay=min_delay, max_delay=max_delay, jitter=jitter),
        )


class ExponentialBackoff(Backoff):
    """Exponential backoff generator.

    Args:
        min_delay: First delay and lower bound (default: 10).
        max_delay: Upper bound (default: 10000).
        jitter: Jitter fraction in ``(0, 1]`` (default: disabled).
        factor: Growth factor, ``> 1`` (default: 2.0).

    Example:
        ```pycon
        >>> from backoffgen import ExponentialBackoff
        >>> backoff = ExponentialBackoff(min_delay=0, max_delay=50, factor=10)
        >>> [backoff.next() for _ in range(5)]
        [0, 1, 10, 50, 50]

        ```
    """

    def __init__(
        self,
        min_delay: Any = None,
        max_delay: Any = None,
        jitter: Any = None,
        factor: Any = None,
    ) -> None:
        super().__init__(
            ExponentialStrategy(factor=normalize_factor(factor)),
            BackoffConfig.from_options(min_delay=min_delay, max_delay=max_delay, jitter=jitter),
        )


class FibonacciBackoff(Backoff):
    """Fibonacci backoff generator.

    Args:
        min_delay: First delay and lower bound (default: 10).
        max_delay: Upper bound (default: 10000).
        jitter: Jitter fraction in ``(0, 1]`` (default: disabled).

    Example:
        ```pycon
        >>> from backoffgen import FibonacciBackoff
        >>> backoff = FibonacciBackoff(min_delay=0, max_delay=34)
        >>> [backoff.next() for _ in range(10)]
        [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

        ```
    """

    def __init__(self, min_delay: Any = None, max_delay: Any = None, jitter: Any = None) -> None:
        super().__init__(
            FibonacciStrategy(),
            BackoffConfig.from_options(min_delay=min_delay, max_delay=max_delay, jitter=jitter),
        )


class FixedBackoff(Backoff):
    """Backoff generator walking an explicit sequence.

    Once the sequence is exhausted, the last delay repeats forever.
    Delays are never clamped against bounds, since the sequence defines
    them.

    Args:
        sequence: One or more non-negative integer delays (required).
        jitter: Jitter fraction in ``(0, 1]`` (default: disabled).
        **kwargs: Rejected. ``min_delay`` and ``max_delay`` raise
            ``BackoffConfigError``, anything else ``TypeError``.

    Raises:
        BackoffConfigError: If the sequence is invalid, or if
            ``min_delay`` or ``max_delay`` is passed.

    Example:
        ```pycon
        >>> from backoffgen import FixedBackoff
        >>> backoff = FixedBackoff(sequence=[0, 3, 10])
        >>> [backoff.next() for _ in range(4)]
        [0, 3, 10, 10]

        ```
    """

    def __init__(self, sequence: Any = None, jitter: Any = None, **kwargs: Any) -> None:
        validate_no_bounds(kwargs)
        if kwargs:
            msg = f"FixedBackoff() got unexpected keyword arguments: {', '.join(sorted(kwargs))}"
            raise TypeError(msg)
        super().__init__(FixedStrategy(sequence), BackoffConfig.unbounded(jitter=jitter))


_BACKOFFS: dict[str, type[Backoff]] = {
    "exponential": ExponentialBackoff,
    "fibonacci": FibonacciBackoff,
    "fixed": FixedBackoff,
    "linear": LinearBackoff,
}


def create_backoff(strategy: str, **options: Any) -> Backoff:
    """Create a backoff generator from a strategy name.

    Useful when the strategy is chosen in a configuration file.

    Args:
        strategy: ``"linear"``, ``"exponential"``, ``"fibonacci"`` or
            ``"fixed"`` (case-insensitive).
        **options: Options forwarded to the matching class.

    Returns:
        The generator.

    Raises:
        BackoffConfigError: If the strategy name is unknown or is not a
            string, or if the generator rejects the options.

    Example:
        ```pycon
        >>> from backoffgen import create_backoff
        >>> backoff = create_backoff("Exponential", min_delay=0)
        >>> [backoff.next() for _ in range(6)]
        [0, 1, 2, 4, 8, 16]

        ```
    """
    key = strategy.strip().lower() if isinstance(strategy, str) else None
    if key not in _BACKOFFS:
        msg = (
            f"Unknown backoff strategy {strategy!r}, expected one of: "
            f"{', '.join(sorted(_BACKOFFS))}"
        )
        raise BackoffConfigError(msg, option="strategy")
    return _BACKOFFS[key](**options)

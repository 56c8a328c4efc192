r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciStrategy"]

from typing import TYPE_CHECKING

from backoffgen.strategy.base import BackoffState, BaseBackoffStrategy

if TYPE_CHECKING:
    from backoffgen.config import BackoffConfig


class FibonacciStrategy(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Each delay is the sum of the two before it, seeded with ``0`` and
    ``min_delay``. This ramps up more gently than exponential backoff.
    With ``min_delay=0`` the sequence is the classic
    ``0, 1, 1, 2, 3, 5, 8, ...``.

    The jitter spread is the gap to the previous delay, or the current
    delay itself when both are equal (first step from zero, or a reset
    with ``min_delay=0``).

    Example:
        ```pycon
        >>> from backoffgen.config import BackoffConfig
        >>> from backoffgen.strategy import FibonacciStrategy
        >>> strategy = FibonacciStrategy()
        >>> state = strategy.initial(BackoffConfig(min_delay=10))
        >>> for _ in range(3):
        ...     strategy.step(state)
        ...
        >>> state.current
        30

        ```
    """

    name = "fibonacci"

    def initial(self, config: BackoffConfig) -> BackoffState:
        """Seed the sequence with ``0`` and ``min_delay``.

        Args:
            config: The shared generator configuration.

        Returns:
            A state with ``previous=0`` and ``current=min_delay``.
        """
        return BackoffState(current=config.min_delay, previous=0)

    def spread(self, state: BackoffState) -> float:
        """Return the gap to the previous delay.

        Args:
            state: The generator state.

        Returns:
            ``current - previous``, or ``current`` when both are equal.
        """
        if state.current == state.previous:
            return state.current
        return state.current - state.previous

    def step(self, state: BackoffState) -> None:
        """Shift the pair forward by one Fibonacci term.

        Args:
            state: The generator state, updated in place.
        """
        # Zero plus zero would never grow
        nxt = state.previous + state.current or 1
        state.previous = state.current
        state.current = nxt

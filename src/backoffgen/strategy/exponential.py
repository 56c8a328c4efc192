r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialStrategy"]

from typing import TYPE_CHECKING

from backoffgen.config import DEFAULT_FACTOR
from backoffgen.strategy.base import BackoffState, BaseBackoffStrategy

if TYPE_CHECKING:
    from backoffgen.config import BackoffConfig


class ExponentialStrategy(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Multiplies the pending delay by ``factor`` after every call. A zero
    delay steps to 1 first, since multiplying zero would stall the
    sequence, so ``min_delay=0`` yields ``0, 1, factor, factor**2, ...``.

    The jitter spread is ``current - current / factor``, the size of the
    multiplicative jump that led to the current value.

    Args:
        factor: The growth factor, greater than 1 (default: 2.0).

    Example:
        ```pycon
        >>> from backoffgen.config import BackoffConfig
        >>> from backoffgen.strategy import ExponentialStrategy
        >>> strategy = ExponentialStrategy(factor=3.0)
        >>> state = strategy.initial(BackoffConfig(min_delay=0))
        >>> strategy.step(state)
        >>> strategy.step(state)
        >>> state.current
        3.0

        ```
    """

    name = "exponential"

    def __init__(self, factor: float = DEFAULT_FACTOR) -> None:
        self.factor = factor

    def initial(self, config: BackoffConfig) -> BackoffState:
        """Start at ``min_delay``.

        Args:
            config: The shared generator configuration.

        Returns:
            A state whose pending delay is ``min_delay``.
        """
        return BackoffState(current=config.min_delay)

    def spread(self, state: BackoffState) -> float:
        """Return the size of the jump that led to the pending delay.

        Args:
            state: The generator state.

        Returns:
            ``current - current / factor``, which is ``0`` when the
            pending delay is ``0``.
        """
        return state.current - state.current / self.factor

    def step(self, state: BackoffState) -> None:
        """Multiply the pending delay by ``factor``, stepping 0 to 1.

        Args:
            state: The generator state, updated in place.
        """
        if state.current == 0:
            state.current = 1
        else:
            state.current *= self.factor

    def params(self) -> dict[str, object]:
        return {"factor": self.factor}

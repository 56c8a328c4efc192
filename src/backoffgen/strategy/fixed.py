r"""Fixed (explicit sequence) backoff strategy."""

from __future__ import annotations

__all__ = ["FixedStrategy"]

from typing import TYPE_CHECKING

from backoffgen.strategy.base import BackoffState, BaseBackoffStrategy
from backoffgen.utils.validation import validate_sequence

if TYPE_CHECKING:
    from collections.abc import Sequence

    from backoffgen.config import BackoffConfig


class FixedStrategy(BaseBackoffStrategy):
    """Fixed backoff strategy driven by an explicit sequence.

    Walks through ``sequence`` one delay per call, then repeats the last
    delay forever. The sequence defines its own bounds, so the generator
    configuration carries no ``min_delay``/``max_delay`` for it.

    The jitter spread is the first delay on the first step, and the
    size of the most recent jump afterwards.

    Args:
        sequence: One or more non-negative integer delays.

    Raises:
        BackoffConfigError: If the sequence is not a non-empty list or
            tuple of non-negative integers.

    Example:
        ```pycon
        >>> from backoffgen.config import BackoffConfig
        >>> from backoffgen.strategy import FixedStrategy
        >>> strategy = FixedStrategy([100, 250, 400])
        >>> state = strategy.initial(BackoffConfig.unbounded())
        >>> strategy.step(state)
        >>> strategy.spread(state)
        150

        ```
    """

    name = "fixed"

    def __init__(self, sequence: Sequence[int]) -> None:
        self.sequence = validate_sequence(sequence)
        self._last_index = len(self.sequence) - 1

    def initial(self, config: BackoffConfig) -> BackoffState:  # noqa: ARG002
        """Start at the first delay of the sequence.

        Args:
            config: The shared generator configuration (unused).

        Returns:
            A state pointing at index 0.
        """
        return BackoffState(current=self.sequence[0], index=0)

    def spread(self, state: BackoffState) -> float:
        """Return the first delay, then the size of the latest jump.

        Args:
            state: The generator state.

        Returns:
            The jitter spread at the current index.
        """
        if state.index == 0:
            return self.sequence[0]
        return abs(self.sequence[state.index] - self.sequence[state.index - 1])

    def step(self, state: BackoffState) -> None:
        """Move to the next delay, staying on the last one at the end.

        Args:
            state: The generator state, updated in place.
        """
        state.index = min(state.index + 1, self._last_index)
        state.current = self.sequence[state.index]

    def params(self) -> dict[str, object]:
        return {"sequence": self.sequence}

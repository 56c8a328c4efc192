r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearStrategy"]

from typing import TYPE_CHECKING

from backoffgen.config import DEFAULT_STEP
from backoffgen.strategy.base import BackoffState, BaseBackoffStrategy

if TYPE_CHECKING:
    from backoffgen.config import BackoffConfig


class LinearStrategy(BaseBackoffStrategy):
    """Linear backoff strategy.

    Produces the arithmetic progression ``min_delay``,
    ``min_delay + step``, ``min_delay + 2 * step``, ... The jitter
    spread is the step itself, whatever the position.

    Args:
        step: The increment added after every delay (default: 50).

    Example:
        ```pycon
        >>> from backoffgen.config import BackoffConfig
        >>> from backoffgen.strategy import LinearStrategy
        >>> strategy = LinearStrategy(step=10)
        >>> state = strategy.initial(BackoffConfig(min_delay=5))
        >>> strategy.step(state)
        >>> state.current
        15

        ```
    """

    name = "linear"

    def __init__(self, step: int = DEFAULT_STEP) -> None:
        self.step_size = step

    def initial(self, config: BackoffConfig) -> BackoffState:
        """Start at ``min_delay``.

        Args:
            config: The shared generator configuration.

        Returns:
            A state whose pending delay is ``min_delay``.
        """
        return BackoffState(current=config.min_delay)

    def spread(self, state: BackoffState) -> float:  # noqa: ARG002
        """Return the step size, whatever the position.

        Args:
            state: The generator state (unused).

        Returns:
            The linear increment.
        """
        return self.step_size

    def step(self, state: BackoffState) -> None:
        """Add the increment to the pending delay.

        Args:
            state: The generator state, updated in place.
        """
        state.current += self.step_size

    def params(self) -> dict[str, object]:
        return {"step": self.step_size}

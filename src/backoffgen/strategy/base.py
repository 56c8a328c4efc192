r"""Strategy interface and mutable state shared by backoff generators."""

from __future__ import annotations

__all__ = ["BackoffState", "BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backoffgen.config import BackoffConfig


@dataclass
class BackoffState:
    """Mutable state of one backoff generator.

    Args:
        current: The value emitted by the next call to ``next()``.
        previous: The value before ``current`` (Fibonacci only).
        index: Position in the explicit sequence (fixed only).
    """

    current: float
    previous: float = 0
    index: int = 0


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A strategy defines how the pending delay evolves from one call to
    the next. It holds only immutable parameters; the evolving values
    live in a ``BackoffState`` owned by the generator.
    """

    name: str = "base"

    @abstractmethod
    def initial(self, config: BackoffConfig) -> BackoffState:
        """Return the state of a freshly built or reset generator.

        Args:
            config: The shared generator configuration.

        Returns:
            A new ``BackoffState``.
        """

    @abstractmethod
    def spread(self, state: BackoffState) -> float:
        """Return the jitter amplitude for the pending delay.

        Args:
            state: The generator state.

        Returns:
            The spread, before scaling by the jitter fraction.
        """

    @abstractmethod
    def step(self, state: BackoffState) -> None:
        """Advance the state to the next pending delay, in place.

        Args:
            state: The generator state.
        """

    def __repr__(self) -> str:
        params = ", ".join(f"{key}={value!r}" for key, value in self.params().items())
        return f"{type(self).__name__}({params})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.params() == other.params()

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.params().items())))

    def params(self) -> dict[str, object]:
        """Return the strategy-specific parameters."""
        return {}

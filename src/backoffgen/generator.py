r"""Backoff generator core.

``Backoff`` owns the shared configuration and the mutable state, and
applies the logic common to every strategy: jitter, clamping and
emission. The strategy only decides how the pending delay evolves.
"""

from __future__ import annotations

__all__ = ["Backoff"]

import logging
import math
import random
from typing import TYPE_CHECKING

from backoffgen.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from backoffgen.config import BackoffConfig
    from backoffgen.strategy.base import BackoffState, BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class Backoff:
    """Generator of successive retry delays.

    Each call to ``next()`` returns the pending delay and advances the
    state. The generator never sleeps; the caller waits for the returned
    delay (in whatever unit it chooses) before retrying.

    When jitter is enabled, the pending delay is moved by a value drawn
    uniformly from ``[-spread / 2, spread / 2]`` where ``spread`` is the
    strategy spread scaled by the jitter fraction. The jittered delay is
    kept as the base of the following step. Emitted delays are integers
    clamped to ``[0, max_delay]``.

    Instances are not thread-safe; use one per retry session.

    Args:
        strategy: The strategy driving the delay progression.
        config: The shared configuration.

    Example:
        ```pycon
        >>> from backoffgen.config import BackoffConfig
        >>> from backoffgen.generator import Backoff
        >>> from backoffgen.strategy import LinearStrategy
        >>> backoff = Backoff(LinearStrategy(step=10), BackoffConfig(min_delay=0, max_delay=25))
        >>> [backoff.next() for _ in range(5)]
        [0, 10, 20, 25, 25]
        >>> backoff.reset()
        >>> backoff.next()
        0

        ```
    """

    def __init__(self, strategy: BaseBackoffStrategy, config: BackoffConfig) -> None:
        self._strategy = strategy
        self._config = config
        # Resolved once at construction
        self._spread = strategy.spread
        self._step = strategy.step
        self._state: BackoffState = strategy.initial(config)
        log_structured(
            logger,
            logging.DEBUG,
            f"Created {strategy.name} backoff starting at {self._state.current}",
            strategy=strategy.name,
            **config.to_dict(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strategy={self._strategy!r}, config={self._config!r})"

    def __iter__(self) -> Backoff:
        return self

    def __next__(self) -> int:
        return self.next()

    @property
    def strategy(self) -> BaseBackoffStrategy:
        """The strategy driving the delay progression."""
        return self._strategy

    @property
    def config(self) -> BackoffConfig:
        """The shared configuration."""
        return self._config

    @property
    def current(self) -> float:
        """The pending delay, before jitter and clamping."""
        return self._state.current

    def next(self) -> int:
        """Return the next delay and advance the state.

        Returns:
            The delay, an integer in ``[0, max_delay]``.
        """
        state = self._state
        jitter = self._config.jitter
        spread = 0.0
        if jitter:
            spread = self._spread(state) * jitter
            state.current += random.uniform(-spread / 2, spread / 2)  # noqa: S311

        upper = self._config.max_delay
        # NaN and infinity fail the comparison and clamp to the bound
        if upper is not None and not state.current <= upper:
            delay = upper
        else:
            delay = max(math.floor(state.current), 0)
        state.current = delay

        self._step(state)
        log_structured(
            logger,
            logging.DEBUG,
            f"Next {self._strategy.name} backoff delay: {delay}",
            strategy=self._strategy.name,
            delay=delay,
            spread=spread,
        )
        return delay

    def reset(self) -> None:
        """Return to the initial state of the strategy.

        The configuration and strategy parameters are kept. No jitter
        is applied.
        """
        self._state = self._strategy.initial(self._config)
        logger.debug(f"Reset {self._strategy.name} backoff to {self._state.current}")

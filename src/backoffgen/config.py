r"""Configuration record and defaults for backoff generators.

Options are normalized once, when a generator is built. The resulting
``BackoffConfig`` is immutable and is never re-parsed while delays are
being generated.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_FACTOR",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MIN_DELAY",
    "DEFAULT_STEP",
    "BackoffConfig",
    "normalize_factor",
    "normalize_step",
]

import logging
import math
from dataclasses import asdict, dataclass, replace
from typing import Any

from backoffgen.exceptions import BackoffConfigError
from backoffgen.utils.parsing import parse_float, parse_int
from backoffgen.utils.validation import MAX_DELAY

logger: logging.Logger = logging.getLogger(__name__)

# Lower bound of emitted delays
DEFAULT_MIN_DELAY = 10

# Upper bound of emitted delays
DEFAULT_MAX_DELAY = 10_000

# Increment of the linear strategy
DEFAULT_STEP = 50

# Growth factor of the exponential strategy
DEFAULT_FACTOR = 2.0


def _fallback(option: str, value: Any, default: Any) -> Any:
    if value is not None:
        logger.debug(f"Ignoring invalid {option}={value!r}, using default {default!r}")
    return default


@dataclass(frozen=True)
class BackoffConfig:
    """Shared configuration of a backoff generator.

    Args:
        min_delay: Lower bound of emitted delays when jitter is off,
            and the starting value of the bounded strategies.
        max_delay: Upper bound of emitted delays. ``None`` means the
            delays are unbounded, which is how the fixed strategy runs.
        jitter: Fraction of the per-step spread used as randomization
            amplitude, in ``(0, 1]``. ``0.0`` disables jitter.

    Example:
        ```pycon
        >>> from backoffgen.config import BackoffConfig
        >>> config = BackoffConfig.from_options(min_delay="0", jitter=3)
        >>> config
        BackoffConfig(min_delay=0, max_delay=10000, jitter=0.0)
        >>> config.merge(max_delay=500)
        BackoffConfig(min_delay=0, max_delay=500, jitter=0.0)

        ```
    """

    min_delay: int = DEFAULT_MIN_DELAY
    max_delay: int | None = DEFAULT_MAX_DELAY
    jitter: float = 0.0

    def __post_init__(self) -> None:
        """Validate the fields of a directly built configuration.

        Raises:
            BackoffConfigError: If a field is out of range.
        """
        if not 0 <= self.min_delay <= MAX_DELAY:
            msg = f"min_delay must be in [0, {MAX_DELAY}], got {self.min_delay}"
            raise BackoffConfigError(msg, option="min_delay")
        if self.max_delay is not None and self.max_delay < self.min_delay:
            msg = f"max_delay must be >= min_delay ({self.min_delay}), got {self.max_delay}"
            raise BackoffConfigError(msg, option="max_delay")
        if self.max_delay is not None and self.max_delay > MAX_DELAY:
            msg = f"max_delay must be <= {MAX_DELAY}, got {self.max_delay}"
            raise BackoffConfigError(msg, option="max_delay")
        if not 0 <= self.jitter <= 1:
            msg = f"jitter must be in [0, 1], got {self.jitter}"
            raise BackoffConfigError(msg, option="jitter")

    @classmethod
    def from_options(
        cls,
        min_delay: Any = None,
        max_delay: Any = None,
        jitter: Any = None,
    ) -> BackoffConfig:
        """Build a configuration from loosely typed options.

        Values that cannot be parsed or are out of range are replaced
        by their defaults. A ``max_delay`` below ``min_delay`` falls
        back to ``DEFAULT_MAX_DELAY``, raised to ``min_delay`` if
        needed.

        Args:
            min_delay: Lower bound, parsed as an integer in
                ``[0, MAX_DELAY]``.
            max_delay: Upper bound, parsed as an integer in
                ``[min_delay, MAX_DELAY]``.
            jitter: Jitter fraction, parsed as a float in ``(0, 1]``.

        Returns:
            The normalized configuration.
        """
        lower = parse_int(min_delay)
        if lower is None or not 0 <= lower <= MAX_DELAY:
            lower = _fallback("min_delay", min_delay, DEFAULT_MIN_DELAY)

        upper = parse_int(max_delay)
        if upper is None or not lower <= upper <= MAX_DELAY:
            upper = max(_fallback("max_delay", max_delay, DEFAULT_MAX_DELAY), lower)

        fraction = parse_float(jitter)
        if fraction is None or not 0 < fraction <= 1:
            # Zero disables jitter
            fraction = 0.0 if fraction == 0 else _fallback("jitter", jitter, 0.0)
        return cls(min_delay=lower, max_delay=upper, jitter=fraction)

    @classmethod
    def unbounded(cls, jitter: Any = None) -> BackoffConfig:
        r"""Build the configuration of a strategy without delay bounds.

        Args:
            jitter: Jitter fraction, parsed as a float in ``(0, 1]``.

        Returns:
            A configuration with ``min_delay=0`` and no ``max_delay``.
        """
        return replace(cls.from_options(jitter=jitter), min_delay=0, max_delay=None)

    def merge(self, **overrides: Any) -> BackoffConfig:
        """Create a new config with the non-``None`` overrides applied.

        Args:
            **overrides: Fields to override.

        Returns:
            A new ``BackoffConfig``. The original is unchanged.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a dictionary."""
        return asdict(self)


def normalize_step(step: Any) -> int:
    """Normalize the increment of the linear strategy.

    Args:
        step: The requested step, parsed as an integer in
            ``(0, MAX_DELAY]``.

    Returns:
        The step, or ``DEFAULT_STEP`` if the value is invalid.

    Example:
        ```pycon
        >>> from backoffgen.config import normalize_step
        >>> normalize_step("25")
        25
        >>> normalize_step(-3)
        50

        ```
    """
    value = parse_int(step)
    if value is None or not 0 < value <= MAX_DELAY:
        return _fallback("step", step, DEFAULT_STEP)
    return value


def normalize_factor(factor: Any) -> float:
    """Normalize the growth factor of the exponential strategy.

    Args:
        factor: The requested factor, parsed as a finite float ``> 1``.

    Returns:
        The factor, or ``DEFAULT_FACTOR`` if the value is invalid.

    Example:
        ```pycon
        >>> from backoffgen.config import normalize_factor
        >>> normalize_factor(1.5)
        1.5
        >>> normalize_factor(1)
        2.0

        ```
    """
    value = parse_float(factor)
    if value is None or not math.isfinite(value) or value <= 1:
        return _fallback("factor", factor, DEFAULT_FACTOR)
    return value

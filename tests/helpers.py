r"""Shared test helpers for backoff generator tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backoffgen import Backoff

# Number of independent samples used by the jitter statistics tests
JITTER_SAMPLES = 1000


@dataclass
class JitterSample:
    """Summary of delays sampled at one position of a fresh generator.

    Attributes:
        values: The sampled delays.
        low: The smallest sampled delay.
        high: The largest sampled delay.
        mean: The average sampled delay.
    """

    values: list[int]
    low: int
    high: int
    mean: float

    def count(self, value: int) -> int:
        """Return how many samples are equal to ``value``."""
        return self.values.count(value)


def take(backoff: Backoff, count: int) -> list[int]:
    """Return the next ``count`` delays of a generator."""
    return [backoff.next() for _ in range(count)]


def sample_jitter(
    backoff: Backoff, position: int = 0, samples: int = JITTER_SAMPLES
) -> JitterSample:
    """Sample the delay at ``position`` after a reset, many times.

    Args:
        backoff: The generator to sample. It is reset before each sample.
        position: The 0-indexed call to sample.
        samples: The number of samples.

    Returns:
        The summary of the sampled delays.
    """
    values = []
    for _ in range(samples):
        backoff.reset()
        for _ in range(position):
            backoff.next()
        values.append(backoff.next())
    return JitterSample(
        values=values, low=min(values), high=max(values), mean=sum(values) / len(values)
    )

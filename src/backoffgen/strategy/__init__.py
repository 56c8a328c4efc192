r"""Strategies defining how the pending backoff delay evolves.

This package provides the linear, exponential, Fibonacci and fixed
(explicit sequence) strategies used by ``backoffgen.generator.Backoff``.
"""

from __future__ import annotations

__all__ = [
    "BackoffState",
    "BaseBackoffStrategy",
    "ExponentialStrategy",
    "FibonacciStrategy",
    "FixedStrategy",
    "LinearStrategy",
]

from backoffgen.strategy.base import BackoffState, BaseBackoffStrategy
from backoffgen.strategy.exponential import ExponentialStrategy
from backoffgen.strategy.fibonacci import FibonacciStrategy
from backoffgen.strategy.fixed import FixedStrategy
from backoffgen.strategy.linear import LinearStrategy

r"""Unit tests for LinearStrategy."""

from __future__ import annotations

from backoffgen.config import BackoffConfig
from backoffgen.strategy.linear import LinearStrategy


def test_linear_strategy_initial() -> None:
    """Test that the initial delay is min_delay."""
    state = LinearStrategy(step=10).initial(BackoffConfig(min_delay=30))
    assert state.current == 30


def test_linear_strategy_step() -> None:
    """Test that each step adds the increment."""
    strategy = LinearStrategy(step=10)
    state = strategy.initial(BackoffConfig(min_delay=0))
    strategy.step(state)
    strategy.step(state)
    assert state.current == 20


def test_linear_strategy_spread_is_constant() -> None:
    """Test that the spread is the step whatever the position."""
    strategy = LinearStrategy(step=40)
    state = strategy.initial(BackoffConfig(min_delay=0))
    assert strategy.spread(state) == 40
    strategy.step(state)
    strategy.step(state)
    assert strategy.spread(state) == 40


def test_linear_strategy_default_step() -> None:
    """Test the default increment."""
    assert LinearStrategy().step_size == 50


def test_linear_strategy_eq() -> None:
    """Test strategy equality on parameters."""
    assert LinearStrategy(step=3) == LinearStrategy(step=3)
    assert LinearStrategy(step=3) != LinearStrategy(step=4)
    assert hash(LinearStrategy(step=3)) == hash(LinearStrategy(step=3))

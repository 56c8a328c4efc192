r"""Unit tests for BackoffConfig and option normalization."""

from __future__ import annotations

import logging

import pytest
from coola.equality import objects_are_equal

from backoffgen.config import (
    DEFAULT_FACTOR,
    DEFAULT_MAX_DELAY,
    DEFAULT_MIN_DELAY,
    DEFAULT_STEP,
    BackoffConfig,
    normalize_factor,
    normalize_step,
)
from backoffgen.exceptions import BackoffConfigError

###################################
#     Tests for BackoffConfig     #
###################################


def test_backoff_config_defaults() -> None:
    """Test that BackoffConfig uses correct default values."""
    config = BackoffConfig()
    assert config.min_delay == DEFAULT_MIN_DELAY == 10
    assert config.max_delay == DEFAULT_MAX_DELAY == 10_000
    assert config.jitter == 0.0


def test_backoff_config_is_frozen() -> None:
    """Test that the configuration cannot be mutated."""
    config = BackoffConfig()
    with pytest.raises(AttributeError):
        config.min_delay = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "option"),
    [
        ({"min_delay": -1}, "min_delay"),
        ({"min_delay": 2**53 + 1, "max_delay": None}, "min_delay"),
        ({"max_delay": 10**400}, "max_delay"),
        ({"min_delay": 10, "max_delay": 5}, "max_delay"),
        ({"jitter": 1.5}, "jitter"),
        ({"jitter": -0.1}, "jitter"),
    ],
)
def test_backoff_config_invalid(kwargs: dict, option: str) -> None:
    """Test that a directly built configuration is validated."""
    with pytest.raises(BackoffConfigError, match=rf"{option} must be") as exc_info:
        BackoffConfig(**kwargs)
    assert exc_info.value.option == option


def test_backoff_config_from_options_defaults() -> None:
    """Test that missing options take their defaults."""
    assert BackoffConfig.from_options() == BackoffConfig()


def test_backoff_config_from_options() -> None:
    """Test that valid options are kept."""
    config = BackoffConfig.from_options(min_delay=0, max_delay=50, jitter=0.25)
    assert config == BackoffConfig(min_delay=0, max_delay=50, jitter=0.25)


def test_backoff_config_from_options_strings() -> None:
    """Test that numeric strings are parsed."""
    config = BackoffConfig.from_options(min_delay="100ms", max_delay=" 900", jitter="0.5")
    assert config == BackoffConfig(min_delay=100, max_delay=900, jitter=0.5)


@pytest.mark.parametrize("min_delay", [-5, "abc", None, [], True])
def test_backoff_config_from_options_invalid_min(min_delay: object) -> None:
    """Test that an invalid min_delay falls back to the default."""
    assert BackoffConfig.from_options(min_delay=min_delay).min_delay == DEFAULT_MIN_DELAY


@pytest.mark.parametrize("max_delay", ["abc", None, {}, 5])
def test_backoff_config_from_options_invalid_max(max_delay: object) -> None:
    """Test that an invalid max_delay falls back to the default."""
    assert BackoffConfig.from_options(min_delay=10, max_delay=max_delay).max_delay == 10_000


@pytest.mark.parametrize("max_delay", [2**53 + 1, 10**400, "1" * 400])
def test_backoff_config_from_options_max_out_of_float_range(max_delay: object) -> None:
    """Test that a max_delay too large for a float uses the default."""
    assert BackoffConfig.from_options(max_delay=max_delay).max_delay == DEFAULT_MAX_DELAY


def test_backoff_config_from_options_min_out_of_float_range() -> None:
    """Test that a min_delay too large for a float uses the default."""
    assert BackoffConfig.from_options(min_delay=10**400).min_delay == DEFAULT_MIN_DELAY


def test_backoff_config_from_options_max_raised_to_min() -> None:
    """Test that the fallback max_delay is raised to a large
    min_delay."""
    config = BackoffConfig.from_options(min_delay=20_000, max_delay=1)
    assert config.max_delay == 20_000


@pytest.mark.parametrize("jitter", [0, -0.5, 1.01, "x", None, float("nan"), False])
def test_backoff_config_from_options_invalid_jitter(jitter: object) -> None:
    """Test that an invalid jitter disables jitter."""
    assert BackoffConfig.from_options(jitter=jitter).jitter == 0.0


def test_backoff_config_from_options_jitter_one() -> None:
    """Test that a jitter of 1 is accepted."""
    assert BackoffConfig.from_options(jitter=1).jitter == 1.0


def test_backoff_config_from_options_logs_fallback(caplog: pytest.LogCaptureFixture) -> None:
    """Test that rejected options are logged."""
    with caplog.at_level(logging.DEBUG, logger="backoffgen.config"):
        BackoffConfig.from_options(min_delay=-3)
    assert "Ignoring invalid min_delay=-3, using default 10" in caplog.text


def test_backoff_config_from_options_no_log_for_missing(caplog: pytest.LogCaptureFixture) -> None:
    """Test that missing options are not logged."""
    with caplog.at_level(logging.DEBUG, logger="backoffgen.config"):
        BackoffConfig.from_options()
    assert not caplog.records


def test_backoff_config_unbounded() -> None:
    """Test the configuration of a strategy without delay bounds."""
    config = BackoffConfig.unbounded(jitter=0.3)
    assert config == BackoffConfig(min_delay=0, max_delay=None, jitter=0.3)


def test_backoff_config_merge() -> None:
    """Test that merge applies non-None overrides to a copy."""
    config = BackoffConfig(min_delay=5, max_delay=100)
    merged = config.merge(max_delay=200, jitter=None)
    assert merged == BackoffConfig(min_delay=5, max_delay=200)
    assert config.max_delay == 100


def test_backoff_config_merge_validates() -> None:
    """Test that merged values are validated."""
    with pytest.raises(BackoffConfigError, match=r"max_delay must be"):
        BackoffConfig(min_delay=5).merge(max_delay=1)


def test_backoff_config_to_dict() -> None:
    """Test the conversion to a dictionary."""
    assert objects_are_equal(
        BackoffConfig(min_delay=1, max_delay=2, jitter=0.5).to_dict(),
        {"min_delay": 1, "max_delay": 2, "jitter": 0.5},
    )


####################################
#     Tests for normalize_step     #
####################################


@pytest.mark.parametrize(("step", "expected"), [(25, 25), ("7", 7), (3.9, 3), (1, 1)])
def test_normalize_step(step: object, expected: int) -> None:
    """Test that valid steps are kept."""
    assert normalize_step(step) == expected


@pytest.mark.parametrize("step", [0, -1, None, "abc", 0.5, 2**53 + 1, 10**400])
def test_normalize_step_invalid(step: object) -> None:
    """Test that invalid steps fall back to the default."""
    assert normalize_step(step) == DEFAULT_STEP


######################################
#     Tests for normalize_factor     #
######################################


@pytest.mark.parametrize(("factor", "expected"), [(3, 3.0), ("1.5", 1.5), (1.01, 1.01)])
def test_normalize_factor(factor: object, expected: float) -> None:
    """Test that valid factors are kept."""
    assert normalize_factor(factor) == expected


@pytest.mark.parametrize("factor", [1, 0.9, -3, None, "Infinity", float("inf")])
def test_normalize_factor_invalid(factor: object) -> None:
    """Test that invalid factors fall back to the default."""
    assert normalize_factor(factor) == DEFAULT_FACTOR

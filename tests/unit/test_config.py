r"""Unit tests for the default configuration constants."""

from __future__ import annotations

from aretry import config
from aretry.core import config as core_config


def test_default_max_attempts() -> None:
    assert config.DEFAULT_MAX_ATTEMPTS == 3


def test_default_base_delay() -> None:
    assert config.DEFAULT_BASE_DELAY == 0.0


def test_default_delay_growth_factor() -> None:
    """Test that the default growth means constant delays."""
    assert config.DEFAULT_DELAY_GROWTH_FACTOR == 1.0


def test_default_max_delay() -> None:
    assert config.DEFAULT_MAX_DELAY == 30.0


def test_default_timeout() -> None:
    assert config.DEFAULT_TIMEOUT == 10.0


def test_retry_status_codes() -> None:
    assert config.RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


def test_constants_are_reexported_from_core() -> None:
    """Test that aretry.config re-exports aretry.core.config."""
    for name in config.__all__:
        assert getattr(config, name) is getattr(core_config, name)


def test_constants_are_immutable_types() -> None:
    assert isinstance(config.DEFAULT_MAX_ATTEMPTS, int)
    assert isinstance(config.DEFAULT_MAX_DELAY, float)
    assert isinstance(config.RETRY_STATUS_CODES, tuple)

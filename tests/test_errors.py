"""Tests for exception classes."""

from __future__ import annotations

from pathlib import Path

import pytest

from bounded.errors import (
    BoundedError,
    ConfigLoadError,
    ConfigurationError,
    GreetingError,
)


def test_configuration_error_basic() -> None:
    """Test ConfigurationError with just a message."""
    error = ConfigurationError("bad bounds")
    assert str(error) == "bad bounds"
    assert error.message == "bad bounds"
    assert error.option is None


def test_configuration_error_with_option() -> None:
    """Test ConfigurationError with an option name."""
    error = ConfigurationError("missing bound", option="max")
    assert error.option == "max"
    assert str(error) == "missing bound (option: max)"


def test_config_load_error_with_path() -> None:
    """Test ConfigLoadError with a file path."""
    error = ConfigLoadError("Configuration file not found", path=Path("x.yaml"))
    assert error.path == Path("x.yaml")
    assert str(error) == "Configuration file not found: x.yaml"


def test_config_load_error_without_path() -> None:
    """Test ConfigLoadError without a file path."""
    error = ConfigLoadError("Invalid configuration")
    assert error.path is None
    assert str(error) == "Invalid configuration"


def test_error_inheritance() -> None:
    """Test error inheritance chain."""
    assert issubclass(ConfigurationError, BoundedError)
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(ConfigLoadError, ConfigurationError)
    assert issubclass(GreetingError, BoundedError)
    assert not issubclass(GreetingError, ValueError)


def test_configuration_error_catch_as_value_error() -> None:
    """Test ConfigurationError can be caught as ValueError."""
    with pytest.raises(ValueError):
        raise ConfigurationError("test")


def test_greeting_error_catch_as_bounded_error() -> None:
    """Test GreetingError can be caught as BoundedError."""
    with pytest.raises(BoundedError):
        raise GreetingError("test")

"""Root pytest configuration for bounded package tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bounded.validators import RangeValidator


@pytest.fixture
def numeric_validator() -> RangeValidator:
    """Provide an inclusive numeric validator over [1, 10]."""
    return RangeValidator(1, 10)


@pytest.fixture
def textual_validator() -> RangeValidator:
    """Provide an inclusive textual validator over ["b", "m"]."""
    return RangeValidator("b", "m")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a YAML configuration file.

    Parameters
    ----------
    tmp_path : Path
        Pytest's tmp_path fixture

    Returns
    -------
    Path
        Path to the configuration file
    """
    path = tmp_path / "bounded.yaml"
    path.write_text(
        "range:\n"
        "  min: 1\n"
        "  max: 10\n"
        "  inclusive: true\n"
        "logging:\n"
        "  level: info\n"
        "greeting:\n"
        "  values:\n"
        "    store:\n"
        "      greeting/settings/message: Welcome to the store\n"
        "    default:\n"
        "      greeting/settings/message: Hello\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove BOUNDED_* variables so tests see a predictable environment."""
    for name in [
        "BOUNDED_RANGE_MIN",
        "BOUNDED_RANGE_MAX",
        "BOUNDED_RANGE_INCLUSIVE",
        "BOUNDED_LOG_LEVEL",
        "BOUNDED_LOG_FORMAT",
        "BOUNDED_GREETING_MESSAGE",
        "BOUNDED_GREETING_SCOPE",
    ]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Restore the ``bounded`` logger after each test."""
    logger = logging.getLogger("bounded")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers

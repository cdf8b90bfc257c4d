"""Logging configuration for the bounded package."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_HANDLER_NAME = "bounded"


class LoggingConfig(BaseModel):
    """Configuration for package logging.

    Parameters
    ----------
    level : LogLevel
        Level of the ``bounded`` logger. Case-insensitive on input.
    format : str
        ``logging.Formatter`` format string.

    Examples
    --------
    >>> LoggingConfig(level="debug").level
    'DEBUG'
    """

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log record format",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Upper-case string levels before validation."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the ``bounded`` logger.

    Repeated calls replace the level and format but never add a second
    handler.

    Parameters
    ----------
    config : LoggingConfig | None
        Logging configuration. Defaults to ``LoggingConfig()``.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    config = config if config is not None else LoggingConfig()
    logger = logging.getLogger("bounded")
    logger.setLevel(config.level)

    handler = next(
        (h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.format))

    return logger

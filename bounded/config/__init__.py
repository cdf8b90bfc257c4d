"""Configuration system for the bounded package.

Provides configuration models, YAML loading, environment overrides, and
logging setup.
"""

from __future__ import annotations

from bounded.config.env import load_from_env
from bounded.config.loader import load_config, load_yaml_file, merge_configs
from bounded.config.logging import LoggingConfig, configure_logging
from bounded.config.models import (
    DEFAULT_SCOPE,
    GREETING_MESSAGE_PATH,
    BoundedConfig,
    GreetingConfig,
    RangeConfig,
)

__all__ = [
    # Main config
    "BoundedConfig",
    # Config sections
    "RangeConfig",
    "GreetingConfig",
    "LoggingConfig",
    # Defaults
    "DEFAULT_SCOPE",
    "GREETING_MESSAGE_PATH",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Environment
    "load_from_env",
    # Logging
    "configure_logging",
]

"""Loading configuration from YAML files and the environment."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bounded.config.env import load_from_env
from bounded.config.models import BoundedConfig
from bounded.errors import ConfigLoadError

logger = logging.getLogger(__name__)


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Load a YAML configuration file.

    Parameters
    ----------
    path : Path | str
        Path to the YAML file.

    Returns
    -------
    dict[str, Any]
        Parsed mapping. An empty file yields an empty dict.

    Raises
    ------
    ConfigLoadError
        If the file is missing, is not valid YAML, or does not contain a
        mapping at the top level.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigLoadError("Configuration file not found", path=path) from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML ({e})", path=path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError("Configuration must be a mapping", path=path)
    return data


def merge_configs(
    base: Mapping[str, Any], override: Mapping[str, Any]
) -> dict[str, Any]:
    """Recursively merge two configuration mappings.

    Parameters
    ----------
    base : Mapping[str, Any]
        Base configuration.
    override : Mapping[str, Any]
        Values that take precedence over ``base``.

    Returns
    -------
    dict[str, Any]
        New merged mapping. Neither input is modified.

    Examples
    --------
    >>> merge_configs({"range": {"min": 1, "max": 5}}, {"range": {"max": 9}})
    {'range': {'min': 1, 'max': 9}}
    """
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: Path | str | None = None,
    *,
    env: bool = True,
    environ: Mapping[str, str] | None = None,
) -> BoundedConfig:
    """Load the effective configuration.

    Values are layered as defaults, then the YAML file, then environment
    overrides.

    Parameters
    ----------
    path : Path | str | None
        Optional YAML configuration file.
    env : bool
        Whether to apply ``BOUNDED_*`` environment overrides.
    environ : Mapping[str, str] | None
        Environment to read instead of ``os.environ``.

    Returns
    -------
    BoundedConfig
        The validated configuration.

    Raises
    ------
    ConfigLoadError
        If the file cannot be loaded or the merged values do not validate.
    ConfigurationError
        If an environment override is malformed.
    """
    data: dict[str, Any] = {}
    if path is not None:
        data = load_yaml_file(path)
        logger.debug("Loaded configuration from %s", path)

    if env:
        data = merge_configs(data, load_from_env(environ))

    try:
        return BoundedConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(
            f"Invalid configuration ({e.error_count()} errors)",
            path=Path(path) if path is not None else None,
        ) from e

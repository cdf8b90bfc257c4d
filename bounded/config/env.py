"""Environment variable overrides for configuration.

Recognised variables:

- ``BOUNDED_RANGE_MIN``, ``BOUNDED_RANGE_MAX``: range bounds (kept as
  strings; numeric strings give a numeric range)
- ``BOUNDED_RANGE_INCLUSIVE``: ``1/0``, ``true/false``, ``yes/no``,
  ``on/off``
- ``BOUNDED_LOG_LEVEL``, ``BOUNDED_LOG_FORMAT``: logging section
- ``BOUNDED_GREETING_MESSAGE``: greeting message stored under the default
  message path, in the scope named by ``BOUNDED_GREETING_SCOPE`` (default
  ``store``)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from bounded.config.models import DEFAULT_SCOPE, GREETING_MESSAGE_PATH
from bounded.errors import ConfigurationError

ENV_PREFIX = "BOUNDED_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})

_SIMPLE_VARIABLES: dict[str, tuple[str, str]] = {
    "RANGE_MIN": ("range", "min"),
    "RANGE_MAX": ("range", "max"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FORMAT": ("logging", "format"),
}


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean environment value.

    Parameters
    ----------
    value : str
        Raw value.
    name : str
        Variable name, used in the error.

    Returns
    -------
    bool
        The parsed flag.

    Raises
    ------
    ConfigurationError
        If the value is not a recognised boolean spelling.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ConfigurationError(f"Invalid boolean value {value!r}", option=name)


def load_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect configuration overrides from environment variables.

    Parameters
    ----------
    environ : Mapping[str, str] | None
        Environment to read. Defaults to ``os.environ``.

    Returns
    -------
    dict[str, Any]
        Nested override mapping, suitable for ``merge_configs``.

    Raises
    ------
    ConfigurationError
        If ``BOUNDED_RANGE_INCLUSIVE`` is not a boolean.

    Examples
    --------
    >>> load_from_env({"BOUNDED_RANGE_MIN": "1", "BOUNDED_LOG_LEVEL": "debug"})
    {'range': {'min': '1'}, 'logging': {'level': 'debug'}}
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    for suffix, (section, key) in _SIMPLE_VARIABLES.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is not None:
            overrides.setdefault(section, {})[key] = value

    inclusive_name = ENV_PREFIX + "RANGE_INCLUSIVE"
    inclusive = environ.get(inclusive_name)
    if inclusive is not None:
        overrides.setdefault("range", {})["inclusive"] = parse_bool(
            inclusive, inclusive_name
        )

    message = environ.get(ENV_PREFIX + "GREETING_MESSAGE")
    if message is not None:
        scope = environ.get(ENV_PREFIX + "GREETING_SCOPE", DEFAULT_SCOPE)
        overrides.setdefault("greeting", {})["values"] = {
            scope: {GREETING_MESSAGE_PATH: message}
        }

    return overrides

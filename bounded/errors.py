"""Exception hierarchy for the bounded package.

Configuration problems raise immediately. Ordinary validation failures are
never raised; they are returned as ``ValidationResult`` values.
"""

from __future__ import annotations

from pathlib import Path


class BoundedError(Exception):
    """Base class for all bounded errors."""


class ConfigurationError(BoundedError, ValueError):
    """Validator or configuration parameters are missing or inconsistent.

    Parameters
    ----------
    message : str
        Error message.
    option : str | None
        Name of the offending option, if known.

    Examples
    --------
    >>> str(ConfigurationError("missing bound", option="max"))
    'missing bound (option: max)'
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        self.message = message
        self.option = option
        super().__init__(self._format())

    def _format(self) -> str:
        if self.option is None:
            return self.message
        return f"{self.message} (option: {self.option})"


class ConfigLoadError(ConfigurationError):
    """A configuration file could not be read or did not validate.

    Parameters
    ----------
    message : str
        Error message.
    path : Path | None
        Path of the configuration file.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class GreetingError(BoundedError):
    """The greeting page could not be built."""

"""Configuration models for the bounded package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bounded.config.logging import LoggingConfig
from bounded.validators.kinds import resolve_kind
from bounded.validators.results import FailureCode

GREETING_MESSAGE_PATH = "greeting/settings/message"
DEFAULT_SCOPE = "store"


def _empty_messages() -> dict[FailureCode, str]:
    """Create an empty message override mapping."""
    return {}


class RangeConfig(BaseModel):
    """Configuration for a range validator.

    Parameters
    ----------
    min : int | float | str
        Lower bound.
    max : int | float | str
        Upper bound, of the same comparison kind as ``min``.
    inclusive : bool
        Whether the bounds are valid values.
    messages : dict[FailureCode, str]
        Message template overrides keyed by failure code.

    Examples
    --------
    >>> config = RangeConfig(min=1, max=10)
    >>> config.inclusive
    True
    """

    model_config = ConfigDict(extra="forbid")

    min: int | float | str
    max: int | float | str
    inclusive: bool = Field(default=True, description="Inclusive bounds")
    messages: dict[FailureCode, str] = Field(
        default_factory=_empty_messages, description="Message template overrides"
    )

    @model_validator(mode="after")
    def validate_kinds(self) -> RangeConfig:
        """Validate that both bounds share a comparison kind.

        Returns
        -------
        RangeConfig
            The validated configuration.

        Raises
        ------
        ValueError
            If the bounds are of different kinds.
        """
        resolve_kind(self.min, self.max)
        return self


class GreetingConfig(BaseModel):
    """Configuration for the greeting page.

    Parameters
    ----------
    path : str
        Configuration path of the greeting message.
    scope : str
        Scope the message is read from.
    title : str
        Page title.
    block : str
        Page region the message is placed in.
    values : dict[str, dict[str, str]]
        Scoped configuration store, as scope -> path -> value.

    Examples
    --------
    >>> config = GreetingConfig()
    >>> config.path
    'greeting/settings/message'
    >>> config.block
    'greeting.block'
    """

    model_config = ConfigDict(extra="forbid")

    path: str = Field(default=GREETING_MESSAGE_PATH, description="Message path")
    scope: str = Field(default=DEFAULT_SCOPE, description="Configuration scope")
    title: str = Field(default="Greeting Message", description="Page title")
    block: str = Field(default="greeting.block", description="Target page region")
    values: dict[str, dict[str, str]] = Field(
        default_factory=dict, description="Scoped configuration values"
    )

    @field_validator("path", "scope", "block")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        """Validate that field is non-empty.

        Parameters
        ----------
        v : str
            The value to validate.

        Returns
        -------
        str
            The validated value.

        Raises
        ------
        ValueError
            If value is empty.
        """
        if not v or not v.strip():
            raise ValueError("field must be non-empty")
        return v


class BoundedConfig(BaseModel):
    """Top-level configuration.

    Parameters
    ----------
    range : RangeConfig | None
        Default range for ``bounded check``.
    logging : LoggingConfig
        Logging configuration.
    greeting : GreetingConfig
        Greeting page configuration.

    Examples
    --------
    >>> config = BoundedConfig()
    >>> config.range is None
    True
    >>> config.logging.level
    'WARNING'
    """

    model_config = ConfigDict(extra="forbid")

    range: RangeConfig | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    greeting: GreetingConfig = Field(default_factory=GreetingConfig)

"""Validation results and failure messages.

A validation call always produces a ``ValidationResult``. Failures carry one
``FailureCode`` and a message rendered from the code's template.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class FailureCode(StrEnum):
    """Classification of a failed range validation."""

    NOT_BETWEEN = "notBetween"
    NOT_BETWEEN_STRICT = "notBetweenStrict"
    VALUE_NOT_NUMERIC = "valueNotNumeric"
    VALUE_NOT_STRING = "valueNotString"


DEFAULT_MESSAGES: dict[FailureCode, str] = {
    FailureCode.NOT_BETWEEN: (
        "The input is not between '{min}' and '{max}', inclusively"
    ),
    FailureCode.NOT_BETWEEN_STRICT: (
        "The input is not strictly between '{min}' and '{max}'"
    ),
    FailureCode.VALUE_NOT_NUMERIC: (
        "The min ('{min}') and max ('{max}') values are numeric, "
        "but the input is not"
    ),
    FailureCode.VALUE_NOT_STRING: (
        "The min ('{min}') and max ('{max}') values are non-numeric strings, "
        "but the input is not a string"
    ),
}


class ValidationResult(BaseModel):
    """Outcome of validating one candidate value.

    Attributes
    ----------
    valid : bool
        Whether the value is within the range.
    code : FailureCode | None
        Failure classification, None on success.
    min : Any
        Configured lower bound.
    max : Any
        Configured upper bound.
    value : Any
        The candidate that was validated.
    message : str | None
        Rendered failure message, None on success.

    Examples
    --------
    >>> result = ValidationResult.success(min=1, max=10, value=5)
    >>> bool(result)
    True
    >>> result.code is None
    True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    valid: bool
    code: FailureCode | None = None
    min: Any
    max: Any
    value: Any = None
    message: str | None = None

    @model_validator(mode="after")
    def validate_consistency(self) -> ValidationResult:
        """Validate that a failure carries a code and a success does not.

        Returns
        -------
        ValidationResult
            The validated result.

        Raises
        ------
        ValueError
            If ``valid`` and ``code`` disagree.
        """
        if self.valid and (self.code is not None or self.message is not None):
            raise ValueError("a valid result cannot carry a failure code or message")
        if not self.valid and (self.code is None or self.message is None):
            raise ValueError("a failed result must carry a failure code and message")
        return self

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def success(cls, *, min: Any, max: Any, value: Any) -> ValidationResult:  # noqa: A002
        """Create a successful result."""
        return cls(valid=True, min=min, max=max, value=value)

    @classmethod
    def failure(
        cls,
        code: FailureCode,
        message: str,
        *,
        min: Any,  # noqa: A002
        max: Any,  # noqa: A002
        value: Any,
    ) -> ValidationResult:
        """Create a failed result.

        Parameters
        ----------
        code : FailureCode
            Failure classification.
        message : str
            Rendered failure message.
        min : Any
            Configured lower bound.
        max : Any
            Configured upper bound.
        value : Any
            The candidate that failed.

        Returns
        -------
        ValidationResult
            A result with ``valid=False``.
        """
        return cls(
            valid=False, code=code, message=message, min=min, max=max, value=value
        )

    @property
    def messages(self) -> dict[FailureCode, str]:
        """Failure messages keyed by code, empty on success."""
        if self.code is None or self.message is None:
            return {}
        return {self.code: self.message}

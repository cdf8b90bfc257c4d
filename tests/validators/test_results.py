"""Tests for validation results."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bounded.validators.results import (
    DEFAULT_MESSAGES,
    FailureCode,
    ValidationResult,
)


def test_failure_code_values() -> None:
    """Test that failure codes keep their wire values."""
    assert FailureCode.NOT_BETWEEN == "notBetween"
    assert FailureCode.NOT_BETWEEN_STRICT == "notBetweenStrict"
    assert FailureCode.VALUE_NOT_NUMERIC == "valueNotNumeric"
    assert FailureCode.VALUE_NOT_STRING == "valueNotString"


def test_every_code_has_a_default_message() -> None:
    """Test that each code has a template using both bounds."""
    assert set(DEFAULT_MESSAGES) == set(FailureCode)
    for template in DEFAULT_MESSAGES.values():
        assert "{min}" in template
        assert "{max}" in template


def test_success() -> None:
    """Test a successful result."""
    result = ValidationResult.success(min=1, max=10, value=5)
    assert result.valid
    assert bool(result) is True
    assert result.code is None
    assert result.messages == {}


def test_failure() -> None:
    """Test a failed result."""
    result = ValidationResult.failure(
        FailureCode.NOT_BETWEEN, "out of range", min=1, max=10, value=11
    )
    assert not result
    assert result.code is FailureCode.NOT_BETWEEN
    assert result.messages == {FailureCode.NOT_BETWEEN: "out of range"}


def test_valid_result_cannot_carry_code() -> None:
    """Test that a valid result with a code is rejected."""
    with pytest.raises(ValidationError, match="cannot carry"):
        ValidationResult(valid=True, code=FailureCode.NOT_BETWEEN, min=1, max=2)


def test_failed_result_needs_code() -> None:
    """Test that a failed result without a code is rejected."""
    with pytest.raises(ValidationError, match="must carry"):
        ValidationResult(valid=False, min=1, max=2)


def test_result_is_frozen() -> None:
    """Test that results are immutable."""
    result = ValidationResult.success(min=1, max=10, value=5)
    with pytest.raises(ValidationError):
        result.valid = False  # type: ignore[misc]


def test_serialization() -> None:
    """Test JSON-mode dump of a failure."""
    result = ValidationResult.failure(
        FailureCode.VALUE_NOT_STRING, "msg", min="a", max="z", value=3
    )
    data = result.model_dump(mode="json")
    assert data["code"] == "valueNotString"
    assert data["valid"] is False
    assert data["value"] == 3

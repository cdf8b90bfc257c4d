"""Range validation.

Provides the bounded-range validator, comparison kind resolution, and
validation result types.
"""

from __future__ import annotations

from bounded.validators.between import RangeValidator
from bounded.validators.kinds import (
    ComparisonKind,
    is_nan,
    is_numeric,
    matches_kind,
    resolve_kind,
    to_number,
)
from bounded.validators.results import (
    DEFAULT_MESSAGES,
    FailureCode,
    ValidationResult,
)

__all__ = [
    # Validator
    "RangeValidator",
    # Kinds
    "ComparisonKind",
    "is_nan",
    "is_numeric",
    "matches_kind",
    "resolve_kind",
    "to_number",
    # Results
    "FailureCode",
    "ValidationResult",
    "DEFAULT_MESSAGES",
]

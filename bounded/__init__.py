"""bounded - bounded-range validation.

Decides whether values lie between a configured minimum and maximum,
inclusively or strictly, and classifies the failure when they do not.
"""

from __future__ import annotations

__version__ = "0.1.0"

from bounded.errors import (  # noqa: E402
    BoundedError,
    ConfigLoadError,
    ConfigurationError,
    GreetingError,
)
from bounded.validators import (  # noqa: E402
    ComparisonKind,
    FailureCode,
    RangeValidator,
    ValidationResult,
)

__all__ = [
    "__version__",
    # Validation
    "RangeValidator",
    "ValidationResult",
    "FailureCode",
    "ComparisonKind",
    # Errors
    "BoundedError",
    "ConfigurationError",
    "ConfigLoadError",
    "GreetingError",
]

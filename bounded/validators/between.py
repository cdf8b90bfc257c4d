"""Bounded-range validation.

Provides ``RangeValidator``, which decides whether a value lies between a
configured minimum and maximum, inclusively or strictly, and classifies the
failure when it does not.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from bounded.errors import ConfigurationError
from bounded.templates.renderers import DefaultRenderer, TemplateRenderer
from bounded.validators.kinds import (
    ComparisonKind,
    is_nan,
    matches_kind,
    resolve_kind,
    to_number,
)
from bounded.validators.results import (
    DEFAULT_MESSAGES,
    FailureCode,
    ValidationResult,
)

if TYPE_CHECKING:
    from bounded.config.models import RangeConfig

logger = logging.getLogger(__name__)

_OPTION_NAMES = frozenset({"min", "max", "inclusive", "messages"})


def _coerce_code(code: FailureCode | str) -> FailureCode:
    try:
        return FailureCode(code)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown failure code: {code!r}", option="messages"
        ) from e


class RangeValidator:
    """Validate that values lie between a minimum and a maximum.

    The comparison kind (numeric or textual) is resolved from the bounds at
    construction and never changes. Each candidate is first checked against
    that kind, then ordered against the bounds. Failures are returned as
    values; only bad construction parameters raise.

    Parameters
    ----------
    min : Any
        Lower bound. A number, a numeric string, or a non-numeric string.
    max : Any
        Upper bound, of the same kind as ``min``.
    inclusive : bool
        Whether ``min`` and ``max`` themselves are valid values.
    messages : Mapping[FailureCode | str, str] | None
        Message templates overriding the defaults, keyed by failure code.
        Templates may use the ``{min}``, ``{max}`` and ``{value}``
        placeholders.
    renderer : TemplateRenderer | None
        Renderer used for failure messages.

    Raises
    ------
    ConfigurationError
        If a bound is missing, the bounds differ in kind, or a message
        override names an unknown failure code.

    Examples
    --------
    >>> validator = RangeValidator(1, 10)
    >>> validator.validate(10).valid
    True
    >>> validator.set_inclusive(False).validate(10).code
    <FailureCode.NOT_BETWEEN_STRICT: 'notBetweenStrict'>
    >>> RangeValidator("a", "z").validate(5).code
    <FailureCode.VALUE_NOT_STRING: 'valueNotString'>
    """

    def __init__(
        self,
        min: Any = None,  # noqa: A002
        max: Any = None,  # noqa: A002
        inclusive: bool = True,
        *,
        messages: Mapping[FailureCode | str, str] | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._kind = resolve_kind(min, max)
        self._min = min
        self._max = max
        self._low = self._parse_bound(min)
        self._high = self._parse_bound(max)
        self._inclusive = bool(inclusive)
        self._renderer = renderer if renderer is not None else DefaultRenderer()

        self._templates: dict[FailureCode, str] = dict(DEFAULT_MESSAGES)
        for code, template in (messages or {}).items():
            self._templates[_coerce_code(code)] = template

        self.value: Any = None
        self._last_result: ValidationResult | None = None

        logger.debug(
            "Created %s range validator [%r, %r] (inclusive=%s)",
            self._kind,
            min,
            max,
            self._inclusive,
        )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> RangeValidator:
        """Create a validator from an option mapping.

        Parameters
        ----------
        options : Mapping[str, Any]
            Options with keys ``min``, ``max`` and optionally ``inclusive``
            and ``messages``.

        Returns
        -------
        RangeValidator
            The configured validator.

        Raises
        ------
        ConfigurationError
            If an option is unknown, or as for the constructor.

        Examples
        --------
        >>> RangeValidator.from_options({"min": 0, "max": 5}).is_valid(3)
        True
        """
        unknown = set(options) - _OPTION_NAMES
        if unknown:
            name = sorted(unknown)[0]
            raise ConfigurationError(f"Unknown option: {name!r}", option=name)
        if "min" not in options or "max" not in options:
            raise ConfigurationError(
                "Missing option: 'min' and 'max' have to be given",
                option="min" if "min" not in options else "max",
            )
        return cls(
            options["min"],
            options["max"],
            options.get("inclusive", True),
            messages=options.get("messages"),
        )

    @classmethod
    def from_config(cls, config: RangeConfig) -> RangeValidator:
        """Create a validator from a ``RangeConfig`` section."""
        return cls(
            config.min,
            config.max,
            config.inclusive,
            messages=config.messages,
        )

    @property
    def kind(self) -> ComparisonKind:
        """Comparison kind fixed at construction."""
        return self._kind

    @property
    def min(self) -> Any:
        return self._min

    @property
    def max(self) -> Any:
        return self._max

    @property
    def inclusive(self) -> bool:
        return self._inclusive

    @property
    def messages(self) -> dict[FailureCode, str]:
        """Failure messages from the last validation, empty after success."""
        if self._last_result is None:
            return {}
        return self._last_result.messages

    def set_min(self, min: Any) -> RangeValidator:  # noqa: A002
        """Set the lower bound.

        Parameters
        ----------
        min : Any
            New lower bound, of the validator's comparison kind.

        Returns
        -------
        RangeValidator
            This validator.

        Raises
        ------
        ConfigurationError
            If the new bound does not match the comparison kind.
        """
        self._low = self._check_bound(min, self._max, "min")
        self._min = min
        return self

    def set_max(self, max: Any) -> RangeValidator:  # noqa: A002
        """Set the upper bound.

        Parameters
        ----------
        max : Any
            New upper bound, of the validator's comparison kind.

        Returns
        -------
        RangeValidator
            This validator.

        Raises
        ------
        ConfigurationError
            If the new bound does not match the comparison kind.
        """
        self._high = self._check_bound(self._min, max, "max")
        self._max = max
        return self

    def set_inclusive(self, inclusive: bool) -> RangeValidator:
        """Set whether the bounds themselves are valid values."""
        self._inclusive = bool(inclusive)
        return self

    def set_message(self, code: FailureCode | str, template: str) -> RangeValidator:
        """Override the message template for one failure code."""
        self._templates[_coerce_code(code)] = template
        return self

    def replace(self, **changes: Any) -> RangeValidator:
        """Return a new validator with some options changed.

        The current validator is left untouched.

        Parameters
        ----------
        **changes : Any
            Any of ``min``, ``max``, ``inclusive`` and ``messages``.

        Returns
        -------
        RangeValidator
            A new, independently validated instance.

        Raises
        ------
        ConfigurationError
            If an option is unknown or the new configuration is invalid.

        Examples
        --------
        >>> strict = RangeValidator(1, 10).replace(inclusive=False)
        >>> strict.inclusive
        False
        """
        options: dict[str, Any] = {
            "min": self._min,
            "max": self._max,
            "inclusive": self._inclusive,
            "messages": dict(self._templates),
        }
        options.update(changes)
        validator = self.from_options(options)
        validator._renderer = self._renderer
        return validator

    def validate(self, value: Any) -> ValidationResult:
        """Validate a candidate value against the range.

        Parameters
        ----------
        value : Any
            Candidate value.

        Returns
        -------
        ValidationResult
            Success, or a failure classified as ``VALUE_NOT_NUMERIC``,
            ``VALUE_NOT_STRING``, ``NOT_BETWEEN`` or ``NOT_BETWEEN_STRICT``.
        """
        self.value = value

        if not matches_kind(value, self._kind):
            if self._kind is ComparisonKind.NUMERIC:
                return self._fail(FailureCode.VALUE_NOT_NUMERIC, value)
            return self._fail(FailureCode.VALUE_NOT_STRING, value)

        low, high = self._low, self._high
        if self._kind is ComparisonKind.NUMERIC:
            candidate = to_number(value)
            # NaN orders against nothing; Decimal NaN raises on comparison
            if is_nan(candidate) or is_nan(low) or is_nan(high):
                return self._fail(self._range_code(), value)
        else:
            candidate = value

        if self._inclusive:
            if not low <= candidate <= high:
                return self._fail(FailureCode.NOT_BETWEEN, value)
        elif not low < candidate < high:
            return self._fail(FailureCode.NOT_BETWEEN_STRICT, value)

        result = ValidationResult.success(min=self._min, max=self._max, value=value)
        self._last_result = result
        return result

    def is_valid(self, value: Any) -> bool:
        """Return True if and only if the value is within the range."""
        return self.validate(value).valid

    __call__ = validate

    def _fail(self, code: FailureCode, value: Any) -> ValidationResult:
        message = self._renderer.render(
            self._templates[code],
            {"min": self._min, "max": self._max, "value": value},
        )
        logger.debug("Value %r failed range validation: %s", value, code)
        result = ValidationResult.failure(
            code, message, min=self._min, max=self._max, value=value
        )
        self._last_result = result
        return result

    def _range_code(self) -> FailureCode:
        if self._inclusive:
            return FailureCode.NOT_BETWEEN
        return FailureCode.NOT_BETWEEN_STRICT

    def _parse_bound(self, bound: Any) -> Any:
        if self._kind is ComparisonKind.NUMERIC:
            return to_number(bound)
        return bound

    def _check_bound(self, min: Any, max: Any, option: str) -> Any:  # noqa: A002
        # the untouched bound already has self._kind, so a mismatch raises here
        try:
            resolve_kind(min, max)
        except ConfigurationError as e:
            raise ConfigurationError(e.message, option=option) from e
        return self._parse_bound(min if option == "min" else max)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min={self._min!r}, max={self._max!r}, "
            f"inclusive={self._inclusive!r})"
        )

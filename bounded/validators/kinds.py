"""Comparison kinds for bound pairs.

A bound pair is compared either numerically or lexicographically. The kind is
resolved once from the bounds and every candidate is checked against it
before any ordering comparison happens.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import StrEnum
from fractions import Fraction
from typing import Any

from bounded.errors import ConfigurationError

Number = int | float | Decimal | Fraction

_NUMERIC_STRING = re.compile(
    r"""
    ^\s*
    [+-]?
    (?:\d+(?P<fraction>\.\d*)?|(?P<leading>\.\d+))
    (?P<exponent>[eE][+-]?\d+)?
    \s*$
    """,
    re.VERBOSE,
)


class ComparisonKind(StrEnum):
    """How a bound pair orders its candidates."""

    NUMERIC = "numeric"
    TEXTUAL = "textual"


def is_numeric(value: Any) -> bool:
    """Check whether a value belongs to the numeric comparison kind.

    Parameters
    ----------
    value : Any
        Value to check.

    Returns
    -------
    bool
        True for real numbers (excluding ``bool``) and numeric strings.

    Examples
    --------
    >>> is_numeric(3)
    True
    >>> is_numeric(" -2.5e3 ")
    True
    >>> is_numeric("nan")
    False
    >>> is_numeric(True)
    False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float | Decimal | Fraction):
        return True
    if isinstance(value, str):
        return _NUMERIC_STRING.match(value) is not None
    return False


def to_number(value: Any) -> Number:
    """Convert a numeric value or numeric string to a number.

    Parameters
    ----------
    value : Any
        Value accepted by :func:`is_numeric`.

    Returns
    -------
    Number
        The value itself for numbers. For strings, an ``int`` when there is
        no fraction or exponent, otherwise a ``float``. Integer strings longer
        than the interpreter's int conversion limit become a ``Decimal``.

    Raises
    ------
    TypeError
        If the value is not numeric.

    Examples
    --------
    >>> to_number("42")
    42
    >>> to_number("1e2")
    100.0
    """
    if isinstance(value, str):
        match = _NUMERIC_STRING.match(value)
        if match is None:
            raise TypeError(f"not a numeric value: {value!r}")
        text = value.strip()
        if match.group("fraction") or match.group("leading") or match.group("exponent"):
            return float(text)
        try:
            return int(text)
        except ValueError:
            # more digits than sys.get_int_max_str_digits() allows
            return Decimal(text)

    if not is_numeric(value):
        raise TypeError(f"not a numeric value: {value!r}")
    return value


def is_nan(value: Number) -> bool:
    """Check whether a number is NaN, including ``Decimal`` quiet and signaling NaN."""
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def resolve_kind(min: Any, max: Any) -> ComparisonKind:  # noqa: A002
    """Resolve the comparison kind of a bound pair.

    Parameters
    ----------
    min : Any
        Lower bound.
    max : Any
        Upper bound.

    Returns
    -------
    ComparisonKind
        ``NUMERIC`` when both bounds are numeric, ``TEXTUAL`` when both are
        non-numeric strings.

    Raises
    ------
    ConfigurationError
        If a bound is missing or the bounds are of different kinds.

    Examples
    --------
    >>> resolve_kind(1, "10")
    <ComparisonKind.NUMERIC: 'numeric'>
    >>> resolve_kind("a", "z")
    <ComparisonKind.TEXTUAL: 'textual'>
    """
    if min is None or max is None:
        raise ConfigurationError(
            "Missing option: 'min' and 'max' have to be given",
            option="min" if min is None else "max",
        )

    if is_numeric(min) and is_numeric(max):
        return ComparisonKind.NUMERIC
    if (
        isinstance(min, str)
        and isinstance(max, str)
        and not is_numeric(min)
        and not is_numeric(max)
    ):
        return ComparisonKind.TEXTUAL

    raise ConfigurationError(
        "Invalid options: 'min' and 'max' should be of the same scalar type"
    )


def matches_kind(value: Any, kind: ComparisonKind) -> bool:
    """Check whether a candidate can be ordered under the given kind."""
    if kind is ComparisonKind.NUMERIC:
        return is_numeric(value)
    return isinstance(value, str)

"""Boundary checks shared by the calculators.

Each helper returns the value unchanged (as float/int) when it is inside the
documented domain and raises InvalidInputError naming the field otherwise.
"""

import math
from collections.abc import Mapping

from nestegg.core.exceptions import InvalidInputError


def require_number(field: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, value, "must be a number")
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(field, value, "must be finite")
    return float(value)


def require_non_negative(field: str, value: float) -> float:
    value = require_number(field, value)
    if value < 0:
        raise InvalidInputError(field, value, "must be >= 0")
    return value


def require_positive(field: str, value: float) -> float:
    value = require_number(field, value)
    if value <= 0:
        raise InvalidInputError(field, value, "must be > 0")
    return value


def require_fraction(field: str, value: float) -> float:
    """Rates expressed as fractions: 0.10 for 10%, never 10."""
    value = require_number(field, value)
    if not 0 <= value <= 1:
        raise InvalidInputError(field, value, "must be between 0 and 1")
    return value


def require_term(field: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(field, value, "must be a whole number of years")
    if value <= 0:
        raise InvalidInputError(field, value, "must be > 0")
    return value


def require_amounts(field: str, amounts: Mapping) -> dict:
    """Check every value of a category->amount mapping is a finite, non-negative number."""
    return {key: require_non_negative(f"{field}[{key}]", value) for key, value in amounts.items()}


def require_choice(field: str, enum_cls, value):
    """Coerce ``value`` to a member of ``enum_cls``."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise InvalidInputError(field, value, f"expected one of: {allowed}") from None


def compound(field: str, base: float, periods: int) -> float:
    """``base ** periods``, reporting overflow against ``field``."""
    try:
        return base**periods
    except OverflowError:
        raise InvalidInputError(field, periods, "too large to compound") from None

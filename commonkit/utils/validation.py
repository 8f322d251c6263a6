"""
Argument validation helpers for the math namespaces.

Each helper either returns the normalised value or raises InvalidInputError
with a message naming the offending argument.
"""

import math
from numbers import Integral, Real

from commonkit.utils.errors import InvalidInputError, NumericOverflowError


def require_integer(value, name: str = "n") -> int:
    """
    Ensure value is an integer (bool excluded) and return it as a plain int.

    Raises:
        InvalidInputError: If value is not a numbers.Integral.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(f"{name} must be an integer, got: {value!r}")
    return int(value)


def require_real(value, name: str = "x") -> float:
    """
    Ensure value is a real number that is not NaN and return it as a float.

    Raises:
        InvalidInputError: If value is not real or is NaN.
        NumericOverflowError: If value is an int beyond float range.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a real number, got: {value!r}")
    try:
        value = float(value)
    except OverflowError as exc:
        raise NumericOverflowError(f"{name} is too large for a float") from exc
    if math.isnan(value):
        raise InvalidInputError(f"{name} must not be NaN")
    return value

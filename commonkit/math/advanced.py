"""
Advanced mathematical functions (feature "advanced").

**Contents**:
  - Exponentiation: pow
  - Number theory: gcd, lcm
  - Roots and logarithms: sqrt, cbrt, ln, log10, log2, exp
  - Hyperbolic functions: sinh, cosh, tanh

**Domain handling**: Out-of-domain arguments raise InvalidInputError instead
of producing NaN, and float overflow raises NumericOverflowError instead of
producing inf or leaking a bare OverflowError.

**pow semantics** (integer operands):
  - exponent ≥ 0 → exact int, bounded to the signed 64-bit range.
  - exponent < 0 → float reciprocal, e.g. pow(2, -2) == 0.25.
"""

import math
from numbers import Integral

import numpy as np

from commonkit.features import ADVANCED, require_feature
from commonkit.utils.errors import DivisionByZeroError, InvalidInputError, NumericOverflowError
from commonkit.utils.validation import require_integer, require_real

require_feature(ADVANCED)

# pow is exported as an attribute but kept out of __all__ so that star
# imports never shadow the builtin.
__all__ = [
    "gcd",
    "lcm",
    "sqrt",
    "cbrt",
    "ln",
    "log10",
    "log2",
    "exp",
    "sinh",
    "cosh",
    "tanh",
    "INT64_MIN",
    "INT64_MAX",
]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def pow(base, exponent):
    """
    Raise base to exponent.

    **Functionally**:
    - int ** non-negative int → exact int within [INT64_MIN, INT64_MAX].
    - int ** negative int → float reciprocal (1 / base**|exponent|).
    - any float operand → float via math.pow.

    Args:
        base: Base value.
        exponent: Exponent value.

    Returns:
        base raised to exponent.

    Raises:
        DivisionByZeroError: If base is 0 and exponent is negative.
        NumericOverflowError: If the result leaves the 64-bit / float range.
        InvalidInputError: If the result is not real (negative base, fractional exponent).

    Example:
        >>> pow(2, 10)
        1024
        >>> pow(2, -1)
        0.5
    """
    if base == 0 and exponent < 0:
        raise DivisionByZeroError("0 cannot be raised to a negative power")

    if _is_int(base) and _is_int(exponent) and exponent >= 0:
        return _int_pow(int(base), int(exponent))

    try:
        return math.pow(base, exponent)
    except OverflowError as exc:
        raise NumericOverflowError(f"pow({base}, {exponent}) overflows a float") from exc
    except ValueError as exc:
        raise InvalidInputError(f"pow({base}, {exponent}) has no real result") from exc


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _int_pow(base: int, exponent: int) -> int:
    # |base| >= 2**(bits-1), so the result has at least (bits-1)*exponent bits.
    magnitude_bits = base.bit_length() - 1 if base >= 0 else (-base).bit_length() - 1
    if magnitude_bits * exponent >= 64:
        raise NumericOverflowError(f"pow({base}, {exponent}) exceeds the signed 64-bit range")

    result = base**exponent
    if result < INT64_MIN or result > INT64_MAX:
        raise NumericOverflowError(f"pow({base}, {exponent}) exceeds the signed 64-bit range")
    return result


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor via Euclid's algorithm.

    **Mathematical**: Repeatedly replace (a, b) with (b, a mod b) until b is 0;
    a is then the gcd.

    **Functionally**:
    - Result is always non-negative.
    - gcd(0, 0) == 0 by convention; gcd(a, 0) == |a|.
    - Commutative: gcd(a, b) == gcd(b, a).

    Example:
        >>> gcd(48, 18)
        6
    """
    a = require_integer(a, "a")
    b = require_integer(b, "b")
    a, b = (a if a >= 0 else -a), (b if b >= 0 else -b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Least common multiple, |a*b| / gcd(a, b).

    lcm(a, 0) == 0 for a != 0. Satisfies lcm(a, b) * gcd(a, b) == |a * b|.

    Raises:
        DivisionByZeroError: If both a and b are 0 (gcd is 0).
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise DivisionByZeroError("lcm(0, 0) is undefined: gcd is zero")
    product = int(a) * int(b)
    return (product if product >= 0 else -product) // divisor


def sqrt(x: float) -> float:
    """
    Square root.

    Raises:
        InvalidInputError: If x is negative or NaN.
    """
    x = require_real(x)
    if x < 0:
        raise InvalidInputError(f"sqrt is undefined for negative input, got: {x}")
    return math.sqrt(x)


def cbrt(x: float) -> float:
    """Cube root (defined for all reals, cbrt(-8) == -2)."""
    return float(np.cbrt(x))


def ln(x: float) -> float:
    """
    Natural logarithm.

    Raises:
        InvalidInputError: If x <= 0 or NaN.
    """
    return math.log(_positive(x, "ln"))


def log10(x: float) -> float:
    """
    Base-10 logarithm.

    Raises:
        InvalidInputError: If x <= 0 or NaN.
    """
    return math.log10(_positive(x, "log10"))


def log2(x: float) -> float:
    """
    Base-2 logarithm.

    Raises:
        InvalidInputError: If x <= 0 or NaN.
    """
    return math.log2(_positive(x, "log2"))


def _positive(x, func: str) -> float:
    x = require_real(x)
    if x <= 0:
        raise InvalidInputError(f"{func} is undefined for non-positive input, got: {x}")
    return x


def exp(x: float) -> float:
    """
    e raised to x.

    Raises:
        NumericOverflowError: If the result exceeds float range (x > ~709.78).
    """
    return _guarded(math.exp, x, "exp")


def sinh(x: float) -> float:
    """Hyperbolic sine. Raises NumericOverflowError past float range."""
    return _guarded(math.sinh, x, "sinh")


def cosh(x: float) -> float:
    """Hyperbolic cosine. Raises NumericOverflowError past float range."""
    return _guarded(math.cosh, x, "cosh")


def tanh(x: float) -> float:
    """Hyperbolic tangent, in (-1, 1)."""
    return math.tanh(x)


def _guarded(func, x, name: str) -> float:
    try:
        return func(x)
    except OverflowError as exc:
        raise NumericOverflowError(f"{name}({x}) overflows a float") from exc

"""
Trigonometric functions (feature "trigonometry").

All angles are in radians. deg_to_rad / rad_to_deg convert between units.

**Reciprocal functions**: csc, sec and cot divide by sin, cos and tan. Floating
point never evaluates cos(pi/2) or sin(pi) to an exact zero (they come out
around 1e-16), so the divisor is treated as zero when its magnitude is below
ZERO_TOLERANCE, and DivisionByZeroError is raised instead of returning a
meaningless ±1e16.
"""

import math

from commonkit.features import TRIGONOMETRY, require_feature
from commonkit.math.constants import PI
from commonkit.utils.errors import DivisionByZeroError, InvalidInputError
from commonkit.utils.validation import require_real

require_feature(TRIGONOMETRY)

__all__ = [
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "deg_to_rad",
    "rad_to_deg",
    "csc",
    "sec",
    "cot",
    "ZERO_TOLERANCE",
]

ZERO_TOLERANCE = 1e-12


def sin(x: float) -> float:
    """
    Sine of x (radians).

    Raises:
        InvalidInputError: If x is infinite or NaN.
    """
    return math.sin(_finite(x, "sin"))


def cos(x: float) -> float:
    """Cosine of x (radians)."""
    return math.cos(_finite(x, "cos"))


def tan(x: float) -> float:
    """Tangent of x (radians)."""
    return math.tan(_finite(x, "tan"))


def _finite(x, func: str) -> float:
    x = require_real(x)
    if math.isinf(x):
        raise InvalidInputError(f"{func} is undefined for infinite arguments, got: {x}")
    return x


def asin(x: float) -> float:
    """
    Inverse sine, result in [-pi/2, pi/2].

    Raises:
        InvalidInputError: If x is outside [-1, 1] or NaN.
    """
    return math.asin(_unit_interval(x, "asin"))


def acos(x: float) -> float:
    """
    Inverse cosine, result in [0, pi].

    Raises:
        InvalidInputError: If x is outside [-1, 1] or NaN.
    """
    return math.acos(_unit_interval(x, "acos"))


def _unit_interval(x, func: str) -> float:
    x = require_real(x)
    if x < -1.0 or x > 1.0:
        raise InvalidInputError(f"{func} is undefined outside [-1, 1], got: {x}")
    return x


def atan(x: float) -> float:
    """Inverse tangent, result in (-pi/2, pi/2)."""
    return math.atan(x)


def atan2(y: float, x: float) -> float:
    """Angle of the point (x, y) from the positive x-axis, result in [-pi, pi]."""
    return math.atan2(y, x)


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * PI / 180.0


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / PI


def csc(x: float) -> float:
    """
    Cosecant, 1 / sin(x).

    Raises:
        DivisionByZeroError: If sin(x) is zero (x = k*pi).
        InvalidInputError: If x is infinite or NaN.
    """
    return _reciprocal(math.sin(_finite(x, "csc")), "csc", x)


def sec(x: float) -> float:
    """
    Secant, 1 / cos(x).

    Raises:
        DivisionByZeroError: If cos(x) is zero (x = pi/2 + k*pi).
    """
    return _reciprocal(math.cos(_finite(x, "sec")), "sec", x)


def cot(x: float) -> float:
    """
    Cotangent, 1 / tan(x).

    Raises:
        DivisionByZeroError: If tan(x) is zero (x = k*pi).
    """
    return _reciprocal(math.tan(_finite(x, "cot")), "cot", x)


def _reciprocal(value: float, func: str, x: float) -> float:
    if math.fabs(value) < ZERO_TOLERANCE:
        raise DivisionByZeroError(f"{func}({x}) is undefined: divisor evaluates to zero")
    return 1.0 / value

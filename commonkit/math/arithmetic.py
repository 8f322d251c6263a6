"""
Basic arithmetic over any standard numeric type.

**Conceptual**: Thin, generic wrappers around the arithmetic operators. The
same function works for int, float, Fraction and Decimal because it relies on
the operators only (duck typing), with the Numeric type variable documenting
that both operands and the result share one type.

**Division semantics**:
  - Two integers: floor division, so divide(a, b) * b + modulo(a, b) == a exactly.
  - Anything else: true division (divide(a, b) * b ≈ a).
  - A zero divisor raises DivisionByZeroError for both divide and modulo.
"""

from numbers import Integral

from commonkit.utils.errors import DivisionByZeroError
from commonkit.utils.types import Numeric

__all__ = ["add", "subtract", "multiply", "divide", "modulo"]


def add(a: Numeric, b: Numeric) -> Numeric:
    """Return a + b."""
    return a + b


def subtract(a: Numeric, b: Numeric) -> Numeric:
    """Return a - b."""
    return a - b


def multiply(a: Numeric, b: Numeric) -> Numeric:
    """Return a * b."""
    return a * b


def divide(a: Numeric, b: Numeric) -> Numeric:
    """
    Divide a by b.

    **Functionally**:
    - int / int → floor quotient (int), matching modulo() so the pair
      reconstructs the dividend exactly.
    - any other mix → true quotient.

    Args:
        a: Dividend.
        b: Divisor (must be non-zero).

    Returns:
        The quotient.

    Raises:
        DivisionByZeroError: If b == 0.

    Example:
        >>> divide(7, 2)
        3
        >>> divide(7.0, 2)
        3.5
    """
    _check_divisor(b)
    if isinstance(a, Integral) and isinstance(b, Integral):
        return a // b
    return a / b


def modulo(a: Numeric, b: Numeric) -> Numeric:
    """
    Return the remainder of a divided by b (sign follows the divisor).

    Raises:
        DivisionByZeroError: If b == 0.
    """
    _check_divisor(b)
    return a % b


def _check_divisor(b) -> None:
    if b == 0:
        raise DivisionByZeroError("Divisor must be non-zero")

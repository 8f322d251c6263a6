"""
Number-theory and integer helpers.

**Conceptual**: Small predicates and transforms over integers: parity,
absolute value, factorial, primality and digit counting.

**Integer width**: Python integers are unbounded, but factorial follows
unsigned 64-bit semantics so results stay interchangeable with fixed-width
consumers. 20! = 2,432,902,008,176,640,000 is the largest factorial below
2**64; factorial(21) raises NumericOverflowError instead of growing silently.

**Input validation**: The integer helpers accept any numbers.Integral
(int, numpy integers, bool excluded) and raise InvalidInputError for
floats and other non-integers.
"""

import math

from commonkit.utils.errors import InvalidInputError, NumericOverflowError
from commonkit.utils.types import Numeric
from commonkit.utils.validation import require_integer

# abs is exported as an attribute but kept out of __all__ so that star
# imports never shadow the builtin.
__all__ = [
    "is_even",
    "is_odd",
    "factorial",
    "is_prime",
    "next_prime",
    "digit_count",
    "MAX_FACTORIAL_INPUT",
    "UINT64_MAX",
]

UINT64_MAX = 2**64 - 1
MAX_FACTORIAL_INPUT = 20


def is_even(n: int) -> bool:
    """Return True when n is divisible by two."""
    return require_integer(n) % 2 == 0


def is_odd(n: int) -> bool:
    """Return True when n is not divisible by two."""
    return require_integer(n) % 2 != 0


def abs(n: Numeric) -> Numeric:
    """
    Absolute value for any signed numeric type.

    The result keeps the input's type (int stays int, Decimal stays Decimal).
    Negative zero maps to positive zero.
    """
    return -n if n <= 0 else n


def factorial(n: int) -> int:
    """
    Compute n! for a non-negative integer.

    **Mathematical**:
        0! = 1
        n! = n × (n-1)!   for n ≥ 1

    **Functionally**:
    - Defined for 0 ≤ n ≤ MAX_FACTORIAL_INPUT (20).
    - Results fit in an unsigned 64-bit integer.

    Args:
        n: Non-negative integer.

    Returns:
        n! as an int.

    Raises:
        InvalidInputError: If n is negative or not an integer.
        NumericOverflowError: If n > 20 (n! would exceed 2**64 - 1).

    Example:
        >>> factorial(5)
        120
    """
    n = require_integer(n)
    if n < 0:
        raise InvalidInputError(f"factorial is undefined for negative input, got: {n}")
    if n > MAX_FACTORIAL_INPUT:
        raise NumericOverflowError(
            f"factorial({n}) exceeds the unsigned 64-bit range; "
            f"maximum input is {MAX_FACTORIAL_INPUT}"
        )
    return math.factorial(n)


def is_prime(n: int) -> bool:
    """
    Primality test by trial division up to the integer square root.

    **Functionally**:
    - n < 2 → False (not an error).
    - 2 → True; other even numbers → False.
    - Odd candidates 3, 5, 7, ... ≤ isqrt(n) are tried as divisors.

    Example:
        >>> is_prime(17), is_prime(18)
        (True, False)
    """
    n = require_integer(n)
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    limit = math.isqrt(n)
    for divisor in range(3, limit + 1, 2):
        if n % divisor == 0:
            return False
    return True


def next_prime(n: int) -> int:
    """
    Return the smallest prime strictly greater than n.

    Inputs below 2 return 2. Otherwise candidates are incremented and
    re-tested with is_prime().

    Example:
        >>> next_prime(17)
        19
    """
    n = require_integer(n)
    if n < 2:
        return 2

    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def digit_count(n: int) -> int:
    """
    Number of base-10 digits in |n|.

    digit_count(0) == 1; the sign is ignored (digit_count(-123) == 3).
    """
    n = require_integer(n)
    if n < 0:
        n = -n
    if n == 0:
        return 1

    count = 0
    while n > 0:
        count += 1
        n //= 10
    return count

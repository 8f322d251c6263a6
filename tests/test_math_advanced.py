"""
Tests for commonkit/math/advanced.py

Covers gcd/lcm properties, pow's integer/float split and every domain or
overflow error the module raises.
"""

import math

import numpy as np
import pytest

from commonkit.math import advanced
from commonkit.math.advanced import (
    INT64_MAX,
    INT64_MIN,
    cbrt,
    cosh,
    exp,
    gcd,
    lcm,
    ln,
    log2,
    log10,
    sinh,
    sqrt,
    tanh,
)
from commonkit.utils.errors import DivisionByZeroError, InvalidInputError, NumericOverflowError

PAIRS = [(48, 18), (54, 24), (7, 13), (0, 5), (5, 0), (-12, 18), (12, -18), (-7, -21), (1, 1)]


def test_gcd_known_values():
    """Test gcd on known pairs."""
    assert gcd(48, 18) == 6
    assert gcd(54, 24) == 6
    assert gcd(7, 13) == 1


def test_gcd_zero_zero_is_zero():
    """Test that gcd(0, 0) is 0."""
    assert gcd(0, 0) == 0


@pytest.mark.parametrize("a, b", PAIRS)
def test_gcd_divides_both_and_is_commutative(a, b):
    """Test that gcd divides both operands and ignores their order."""
    g = gcd(a, b)
    assert g >= 0
    assert a % g == 0
    assert b % g == 0
    assert gcd(b, a) == g


@pytest.mark.parametrize("a, b", [p for p in PAIRS if p[0] and p[1]])
def test_lcm_times_gcd_is_abs_product(a, b):
    """Test that lcm(a, b) * gcd(a, b) equals abs(a * b)."""
    assert lcm(a, b) * gcd(a, b) == abs(a * b)


def test_lcm_known_values():
    """Test lcm on known pairs."""
    assert lcm(12, 18) == 36
    assert lcm(8, 12) == 24
    assert lcm(5, 7) == 35
    assert lcm(0, 7) == 0


def test_lcm_both_zero_raises():
    """Test that lcm(0, 0) raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError):
        lcm(0, 0)


def test_gcd_rejects_floats():
    """Test that gcd rejects float operands."""
    with pytest.raises(InvalidInputError):
        gcd(4.0, 2)


def test_pow_integer_results_are_exact_ints():
    """Test that integer powers return exact ints."""
    assert advanced.pow(2, 3) == 8
    assert advanced.pow(5, 2) == 25
    assert advanced.pow(1, 10) == 1
    assert advanced.pow(0, 5) == 0
    assert advanced.pow(0, 0) == 1
    assert advanced.pow(-3, 3) == -27
    assert isinstance(advanced.pow(2, 10), int)


def test_pow_negative_exponent_is_float_reciprocal():
    """Test that a negative integer exponent returns a float reciprocal."""
    assert advanced.pow(2, -1) == 0.5
    assert advanced.pow(-2, -2) == 0.25
    assert isinstance(advanced.pow(4, -1), float)


def test_pow_zero_to_negative_power_raises():
    """Test that 0 to a negative power raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError):
        advanced.pow(0, -1)


def test_pow_signed_64_bit_bounds():
    """Test integer pow at the signed 64-bit limits."""
    assert advanced.pow(2, 62) == 2**62
    assert advanced.pow(-2, 63) == INT64_MIN
    with pytest.raises(NumericOverflowError):
        advanced.pow(2, 63)
    with pytest.raises(NumericOverflowError):
        advanced.pow(3, 40)
    with pytest.raises(NumericOverflowError):
        advanced.pow(10, 10**9)
    assert advanced.pow(-1, 10**9 + 1) == -1
    assert INT64_MAX == 2**63 - 1


def test_pow_float_operands():
    """Test pow with float operands."""
    assert advanced.pow(2.0, 0.5) == pytest.approx(math.sqrt(2.0))
    assert advanced.pow(9, 0.5) == pytest.approx(3.0)


def test_pow_float_overflow_and_complex_result():
    """Test float pow overflow and complex results."""
    with pytest.raises(NumericOverflowError):
        advanced.pow(10.0, 400)
    with pytest.raises(InvalidInputError):
        advanced.pow(-8.0, 1.0 / 3.0)


def test_sqrt():
    """Test sqrt on perfect squares."""
    assert sqrt(4.0) == pytest.approx(2.0)
    assert sqrt(9) == pytest.approx(3.0)
    assert sqrt(0.0) == 0.0


@pytest.mark.parametrize("value", [-1.0, -1e-300, float("nan")])
def test_sqrt_rejects_negative_and_nan(value):
    """Test that sqrt rejects negative values and NaN."""
    with pytest.raises(InvalidInputError):
        sqrt(value)


def test_cbrt_handles_negative_values():
    """Test cbrt on positive and negative values."""
    assert cbrt(27.0) == pytest.approx(3.0)
    assert cbrt(-8.0) == pytest.approx(-2.0)


def test_logarithms():
    """Test ln, log10 and log2 on exact powers."""
    assert ln(math.e) == pytest.approx(1.0)
    assert log10(1000.0) == pytest.approx(3.0)
    assert log2(1024) == pytest.approx(10.0)


@pytest.mark.parametrize("func", [ln, log10, log2])
@pytest.mark.parametrize("value", [0.0, -1.0, float("nan")])
def test_logarithms_reject_non_positive_and_nan(func, value):
    """Test that logarithms reject zero, negative values and NaN."""
    with pytest.raises(InvalidInputError):
        func(value)


def test_invalid_input_is_a_value_error():
    """Test that InvalidInputError can be caught as ValueError."""
    with pytest.raises(ValueError):
        ln(-1.0)


def test_exp_and_hyperbolics():
    """Test exp and the hyperbolic functions at known points."""
    assert exp(0.0) == 1.0
    assert exp(1.0) == pytest.approx(math.e)
    assert sinh(0.0) == 0.0
    assert cosh(0.0) == 1.0
    assert tanh(0.0) == 0.0
    assert cosh(1.0) ** 2 - sinh(1.0) ** 2 == pytest.approx(1.0)
    assert tanh(1.0) == pytest.approx(np.tanh(1.0))


@pytest.mark.parametrize("func", [exp, sinh, cosh])
def test_exp_and_hyperbolics_overflow(func):
    """Test that exp, sinh and cosh raise NumericOverflowError for large inputs."""
    with pytest.raises(NumericOverflowError):
        func(1000.0)


def test_pow_is_not_star_exported():
    """Test that pow is kept out of the advanced star export."""
    assert "pow" not in advanced.__all__

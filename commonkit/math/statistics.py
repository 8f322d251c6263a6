"""
Descriptive statistics over one-dimensional samples (feature "statistics").

**Conceptual**: Each function reduces a sample (list/tuple of numbers, NumPy
array or pandas Series) to a single float. Inputs are converted once to a
float64 NumPy array and validated before any computation.

**Validation** (shared by every function):
  - Empty sample → EmptyInputError.
  - NaN anywhere in the sample → InvalidInputError. NaN has no place in a
    total order (median sorts) and silently poisons every other reduction.
  - Non one-dimensional or non-numeric input → InvalidInputError.

**Conventions**:
  - variance / standard_deviation use the population divisor n by default
    (ddof=0). Pass ddof=1 for the sample divisor n - 1.
  - mode returns the most frequent value; ties resolve to the smallest of
    the tied values.

min, max, range and sum are named after the reductions they perform. They are
reachable as attributes (statistics.min) but left out of __all__ so that a
star import never shadows the builtins.
"""

import numpy as np
import pandas as pd
from scipy import stats

from commonkit.features import STATISTICS, require_feature
from commonkit.utils.errors import EmptyInputError, InvalidInputError
from commonkit.utils.types import Sample

require_feature(STATISTICS)

__all__ = [
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "std_dev",
    "product",
    "describe",
]


def _as_sample(data: Sample) -> np.ndarray:
    """
    Convert input to a validated 1-D float64 array.

    Raises:
        InvalidInputError: If data is not 1-D numeric or contains NaN.
        EmptyInputError: If data is empty.
    """
    try:
        values = np.asarray(data, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Sample must contain only real numbers: {exc}") from exc

    if values.ndim != 1:
        raise InvalidInputError(
            f"Sample must be one-dimensional, got array with {values.ndim} dimensions"
        )
    if values.size == 0:
        raise EmptyInputError("Sample is empty")
    if np.isnan(values).any():
        raise InvalidInputError("Sample contains NaN values")
    return values


def mean(data: Sample) -> float:
    """
    Arithmetic mean.

    **Mathematical**: mean = (1/n) Σ x_i

    Example:
        >>> mean([2.0, 4.0, 6.0])
        4.0
    """
    return float(np.mean(_as_sample(data)))


def median(data: Sample) -> float:
    """
    Middle value of the sorted sample.

    For an even count the two middle values are averaged:
        median([1, 2, 3, 4]) == 2.5
    """
    return float(np.median(_as_sample(data)))


def mode(data: Sample) -> float:
    """
    Most frequent value in the sample.

    **Tie-break**: when several values share the highest count, the smallest
    of them is returned (mode([3, 1, 3, 1, 2]) == 1.0). When every value is
    distinct this is the sample minimum.
    """
    result = stats.mode(_as_sample(data), keepdims=False)
    return float(result.mode)


def variance(data: Sample, ddof: int = 0) -> float:
    """
    Variance: mean squared deviation from the mean.

    **Mathematical**:
        var = Σ (x_i - mean)² / (n - ddof)

    **Functionally**:
    - ddof=0 (default) → population variance, divisor n.
    - ddof=1 → sample (Bessel-corrected) variance, divisor n - 1.

    Args:
        data: Sample values.
        ddof: Delta degrees of freedom (non-negative, smaller than n).

    Raises:
        EmptyInputError: If data is empty.
        InvalidInputError: If ddof is negative or n - ddof <= 0.
    """
    values = _as_sample(data)
    if ddof < 0 or values.size - ddof <= 0:
        raise InvalidInputError(
            f"ddof must satisfy 0 <= ddof < n (n={values.size}), got: {ddof}"
        )
    return float(np.var(values, ddof=ddof))


def standard_deviation(data: Sample, ddof: int = 0) -> float:
    """Square root of variance(); population divisor by default."""
    return float(np.sqrt(variance(data, ddof=ddof)))


std_dev = standard_deviation


def min(data: Sample) -> float:
    """Smallest value."""
    return float(np.min(_as_sample(data)))


def max(data: Sample) -> float:
    """Largest value."""
    return float(np.max(_as_sample(data)))


def range(data: Sample) -> float:
    """max - min."""
    return float(np.ptp(_as_sample(data)))


def sum(data: Sample) -> float:
    """Sum of all values."""
    return float(np.sum(_as_sample(data)))


def product(data: Sample) -> float:
    """Product of all values."""
    return float(np.prod(_as_sample(data)))


def describe(data: Sample) -> pd.Series:
    """
    Summarise a sample with every statistic in this module.

    **Functionally**:
    - Output: pandas Series indexed by statistic name
      (count, mean, median, mode, variance, standard_deviation,
      min, max, range, sum, product).
    - Population divisor for variance and standard_deviation.

    Raises:
        EmptyInputError: If data is empty.
        InvalidInputError: If data contains NaN.
    """
    values = _as_sample(data)
    return pd.Series(
        {
            "count": float(values.size),
            "mean": mean(values),
            "median": median(values),
            "mode": mode(values),
            "variance": variance(values),
            "standard_deviation": standard_deviation(values),
            "min": min(values),
            "max": max(values),
            "range": range(values),
            "sum": sum(values),
            "product": product(values),
        },
        name="describe",
    )

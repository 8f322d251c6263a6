"""
Type definitions shared across the math namespaces.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Sequence, TypeVar, Union

import numpy as np
import pandas as pd

# Any standard numeric type supporting + - * / % and comparison.
Numeric = TypeVar("Numeric", int, float, Fraction, Decimal)

# One-dimensional sample accepted by the statistics namespace.
Sample = Union[Sequence[float], np.ndarray, pd.Series]

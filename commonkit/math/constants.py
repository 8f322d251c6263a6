"""
Named mathematical constants.

All values are module-level floats (IEEE-754 double precision). They are
values, not functions, and are never recomputed.
"""

import math
from typing import Final

__all__ = [
    "PI",
    "E",
    "TAU",
    "PHI",
    "SQRT_2",
    "SQRT_3",
    "LN_2",
    "LN_10",
    "LOG2_E",
    "LOG10_E",
    "EULER_GAMMA",
    "CATALAN",
    "APERY",
]

# Circle and exponential
PI: Final[float] = math.pi
E: Final[float] = math.e
TAU: Final[float] = 2.0 * math.pi

# Golden ratio (1 + sqrt(5)) / 2
PHI: Final[float] = 1.618033988749895

SQRT_2: Final[float] = 1.4142135623730951
SQRT_3: Final[float] = 1.7320508075688772

# Logarithms
LN_2: Final[float] = 0.6931471805599453
LN_10: Final[float] = 2.302585092994046
LOG2_E: Final[float] = 1.4426950408889634
LOG10_E: Final[float] = 0.4342944819032518

# Euler–Mascheroni constant γ
EULER_GAMMA: Final[float] = 0.5772156649015329
# Catalan's constant G
CATALAN: Final[float] = 0.915965594177219
# Apéry's constant ζ(3)
APERY: Final[float] = 1.2020569031595942

"""
Computation namespaces, gated by feature.

The basic namespaces (arithmetic, constants, number_utils) are always
available. advanced, statistics and trigonometry are imported only when their
feature is enabled through COMMONKIT_FEATURES; otherwise they are absent from
this package and importing them directly raises FeatureDisabledError.

Public names of every enabled namespace are also re-exported here, e.g.
commonkit.math.gcd when "advanced" is enabled. abs and pow are bound as
attributes (commonkit.math.abs, commonkit.math.pow) but stay out of star
imports so they never shadow the builtins.
"""

from commonkit.features import ADVANCED, STATISTICS, TRIGONOMETRY, enabled_features
from commonkit.math import arithmetic, constants, number_utils
from commonkit.math.arithmetic import *  # noqa: F401,F403
from commonkit.math.constants import *  # noqa: F401,F403
from commonkit.math.number_utils import *  # noqa: F401,F403
from commonkit.math.number_utils import abs  # noqa: F401

_features = enabled_features()

__all__ = [*arithmetic.__all__, *constants.__all__, *number_utils.__all__]

if ADVANCED in _features:
    from commonkit.math import advanced
    from commonkit.math.advanced import *  # noqa: F401,F403
    from commonkit.math.advanced import pow  # noqa: F401
    __all__ += advanced.__all__

if STATISTICS in _features:
    from commonkit.math import statistics
    from commonkit.math.statistics import *  # noqa: F401,F403
    __all__ += statistics.__all__

if TRIGONOMETRY in _features:
    from commonkit.math import trigonometry
    from commonkit.math.trigonometry import *  # noqa: F401,F403
    __all__ += trigonometry.__all__

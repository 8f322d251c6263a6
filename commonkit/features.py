"""
Feature selection for the math namespaces.

**Conceptual**: The computation code is split into independently selectable
features. A consumer enables only what it needs, and the namespaces of
disabled features are never imported into the process:

    basic         arithmetic, constants, number_utils (always on)
    advanced      gcd/lcm/pow/roots/logarithms/hyperbolics
    statistics    mean/median/mode/variance/... over samples
    trigonometry  sin/cos/tan, inverses, reciprocals, unit conversion
    full          all of the above

**How selection works**:
  - COMMONKIT_FEATURES (environment or .env) lists the enabled features.
  - commonkit.math imports only the enabled namespaces.
  - Each gated module calls require_feature() on import and raises
    FeatureDisabledError when its feature is off, so a direct
    `import commonkit.math.statistics` fails as well.

The selection is read once per process (first import of a gated module
caches the module in sys.modules), so set COMMONKIT_FEATURES before importing.
"""

import logging
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from commonkit.config.settings import get_settings
from commonkit.utils.errors import FeatureDisabledError, InvalidConfigurationError

logger = logging.getLogger(__name__)

BASIC = "basic"
ADVANCED = "advanced"
STATISTICS = "statistics"
TRIGONOMETRY = "trigonometry"
FULL = "full"

# Feature name -> math submodules it exposes.
FEATURE_MODULES: Dict[str, Tuple[str, ...]] = {
    BASIC: ("arithmetic", "constants", "number_utils"),
    ADVANCED: ("advanced",),
    STATISTICS: ("statistics",),
    TRIGONOMETRY: ("trigonometry",),
}

# Aliases expanding to several features.
FEATURE_ALIASES: Dict[str, Tuple[str, ...]] = {
    FULL: (BASIC, ADVANCED, STATISTICS, TRIGONOMETRY),
}


def parse_features(raw: Optional[str]) -> FrozenSet[str]:
    """
    Parse a comma-separated feature list into a set of concrete features.

    - Whitespace and case are ignored, empty items skipped.
    - "full" expands to every feature.
    - "basic" is always included.

    Args:
        raw: e.g. "advanced, statistics" or "full". None/"" means "basic".

    Returns:
        Frozen set of concrete feature names (never contains "full").

    Raises:
        InvalidConfigurationError: If an unknown feature name is present.
    """
    selected = {BASIC}
    for item in (raw or "").split(","):
        name = item.strip().lower()
        if not name:
            continue
        if name in FEATURE_ALIASES:
            selected.update(FEATURE_ALIASES[name])
        elif name in FEATURE_MODULES:
            selected.add(name)
        else:
            known = sorted(list(FEATURE_MODULES) + list(FEATURE_ALIASES))
            raise InvalidConfigurationError(
                f"Unknown feature '{name}' in COMMONKIT_FEATURES. "
                f"Known features: {', '.join(known)}"
            )
    return frozenset(selected)


def enabled_features() -> FrozenSet[str]:
    """Return the features enabled by the current settings."""
    features = parse_features(get_settings().features.features)
    logger.debug("Enabled features: %s", ", ".join(sorted(features)))
    return features


def is_enabled(feature: str, features: Optional[Iterable[str]] = None) -> bool:
    """
    Check whether a feature is enabled.

    Args:
        feature: Feature name ("full" is enabled only when every feature is).
        features: Explicit feature set; defaults to enabled_features().
    """
    active = frozenset(features) if features is not None else enabled_features()
    if feature in FEATURE_ALIASES:
        return all(part in active for part in FEATURE_ALIASES[feature])
    return feature in active


def require_feature(feature: str, features: Optional[Iterable[str]] = None) -> None:
    """
    Guard a gated module: raise unless the feature is enabled.

    Raises:
        FeatureDisabledError: If the feature is not enabled.
    """
    if not is_enabled(feature, features):
        raise FeatureDisabledError(
            f"commonkit feature '{feature}' is not enabled. "
            f"Add it to COMMONKIT_FEATURES (e.g. COMMONKIT_FEATURES=basic,{feature}) "
            f"before importing."
        )


def enabled_modules(features: Optional[Iterable[str]] = None) -> Tuple[str, ...]:
    """Return the math submodule names exposed by the given (or enabled) features."""
    active = frozenset(features) if features is not None else enabled_features()
    modules = []
    for feature, names in FEATURE_MODULES.items():
        if feature in active:
            modules.extend(names)
    return tuple(modules)

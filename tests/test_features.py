"""
Tests for commonkit/features.py and feature gating of commonkit.math.

**Testing approach**: The test process runs with COMMONKIT_FEATURES=full
(see conftest.py). Feature selection is read once per process, so the
gating of disabled namespaces is verified in child interpreters started with
a narrower COMMONKIT_FEATURES.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

import commonkit.math
from commonkit.features import (
    ADVANCED,
    BASIC,
    STATISTICS,
    TRIGONOMETRY,
    enabled_features,
    enabled_modules,
    is_enabled,
    parse_features,
    require_feature,
)
from commonkit.utils.errors import FeatureDisabledError, InvalidConfigurationError

REPO_ROOT = Path(__file__).parent.parent


def _run_python(code: str, features: str) -> subprocess.CompletedProcess:
    """Run a snippet in a fresh interpreter with the given feature selection."""
    env = dict(os.environ)
    env["COMMONKIT_FEATURES"] = features
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=REPO_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_parse_features_defaults_to_basic():
    """Test that an empty selection means "basic"."""
    assert parse_features(None) == frozenset({BASIC})
    assert parse_features("") == frozenset({BASIC})


def test_parse_features_always_includes_basic():
    """Test that "basic" is added to every selection."""
    assert parse_features("statistics") == frozenset({BASIC, STATISTICS})


def test_parse_features_full_expands_to_everything():
    """Test that "full" enables every feature."""
    assert parse_features("full") == frozenset({BASIC, ADVANCED, STATISTICS, TRIGONOMETRY})


def test_parse_features_ignores_case_and_whitespace():
    """Test feature parsing with mixed case, spaces and empty items."""
    assert parse_features(" Advanced , TRIGONOMETRY,, ") == frozenset(
        {BASIC, ADVANCED, TRIGONOMETRY}
    )


def test_parse_features_rejects_unknown_names():
    """Test that an unknown feature name is a configuration error."""
    with pytest.raises(InvalidConfigurationError, match="geometry"):
        parse_features("basic,geometry")


def test_is_enabled_and_require_feature_with_explicit_set():
    """Test is_enabled and require_feature against an explicit feature set."""
    features = parse_features("advanced")
    assert is_enabled(ADVANCED, features)
    assert not is_enabled(STATISTICS, features)
    assert not is_enabled("full", features)
    require_feature(ADVANCED, features)
    with pytest.raises(FeatureDisabledError):
        require_feature(STATISTICS, features)


def test_feature_disabled_error_is_an_import_error():
    """Test that FeatureDisabledError can be caught as ImportError."""
    with pytest.raises(ImportError):
        require_feature(TRIGONOMETRY, parse_features("basic"))


def test_enabled_modules():
    """Test the namespaces reported for a feature selection."""
    assert enabled_modules(parse_features("basic")) == ("arithmetic", "constants", "number_utils")
    assert "statistics" in enabled_modules(parse_features("statistics"))


def test_test_session_runs_with_every_feature():
    """Test that the test process has every feature enabled."""
    assert enabled_features() == parse_features("full")
    assert is_enabled("full")


def test_full_selection_exposes_every_namespace():
    """Test that the full selection re-exports every namespace."""
    for name in ("arithmetic", "constants", "number_utils", "advanced", "statistics", "trigonometry"):
        assert hasattr(commonkit.math, name)
    assert commonkit.math.gcd(12, 8) == 4
    assert commonkit.math.mean([1.0, 3.0]) == 2.0
    assert commonkit.math.deg_to_rad(0.0) == 0.0
    assert commonkit.math.factorial(3) == 6


def test_basic_selection_excludes_gated_namespaces():
    """Test that the basic selection never imports gated namespaces."""
    result = _run_python(
        "import sys, commonkit.math as m\n"
        "print(hasattr(m, 'advanced'), hasattr(m, 'gcd'), hasattr(m, 'statistics'))\n"
        "print('commonkit.math.trigonometry' in sys.modules)\n"
        "print(m.add(2, 3))",
        "basic",
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == ["False", "False", "False", "False", "5"]


def test_direct_import_of_disabled_namespace_fails():
    """Test that importing a disabled namespace raises FeatureDisabledError."""
    result = _run_python("import commonkit.math.statistics", "basic,advanced")
    assert result.returncode != 0
    assert "FeatureDisabledError" in result.stderr


def test_partial_selection_loads_only_selected_namespace():
    """Test that a partial selection loads only the selected namespace."""
    result = _run_python(
        "import commonkit.math as m\n"
        "print(m.gcd(48, 18), hasattr(m, 'statistics'), hasattr(m, 'trigonometry'))",
        "advanced",
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == ["6", "False", "False"]


def test_abs_and_pow_are_package_attributes_but_not_star_exported():
    """Test that commonkit.math.abs/pow exist without shadowing builtins on star import."""
    assert commonkit.math.abs(-3) == 3
    assert commonkit.math.pow(2, 10) == 1024
    assert "abs" not in commonkit.math.__all__
    assert "pow" not in commonkit.math.__all__

    namespace = {}
    exec("from commonkit.math import *", namespace)
    assert "gcd" in namespace
    assert "abs" not in namespace
    assert "pow" not in namespace


def test_pow_is_bound_only_with_advanced_feature():
    """Test that commonkit.math.pow is absent under the basic selection."""
    result = _run_python(
        "import commonkit.math as m\n"
        "print(hasattr(m, 'abs'), hasattr(m, 'pow'))",
        "basic",
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == ["True", "False"]

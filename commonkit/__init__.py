"""
commonkit – general-purpose utility library.

Two independent areas:
  - commonkit.math: feature-gated computation namespaces (arithmetic,
    constants, number utilities, advanced functions, trigonometry, statistics).
  - commonkit.logger: one-time bootstrap of the process-wide logging sink.

commonkit.math is not imported here, so importing the package never reads
the feature selection; import commonkit.math explicitly.
"""

from commonkit.logger import LoggerConfig, init_with_config, init_with_default
from commonkit.utils.errors import (
    AlreadyInitializedError,
    CommonKitError,
    DivisionByZeroError,
    EmptyInputError,
    FeatureDisabledError,
    InvalidConfigurationError,
    InvalidInputError,
    LoggerIOError,
    NumericOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    "LoggerConfig",
    "init_with_config",
    "init_with_default",
    "AlreadyInitializedError",
    "CommonKitError",
    "DivisionByZeroError",
    "EmptyInputError",
    "FeatureDisabledError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "LoggerIOError",
    "NumericOverflowError",
]

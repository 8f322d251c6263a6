"""
Exception hierarchy shared by the computation namespaces and the logger bootstrap.

**Conceptual**: Every fallible operation in commonkit raises one of these
exceptions instead of returning a sentinel (NaN, 0, None). Callers can catch
CommonKitError to handle anything raised by the library, catch a specific
subclass for fine-grained handling, or catch the builtin base class they
already know (ZeroDivisionError, ValueError, OverflowError, OSError, ...).

**Error kinds**:
  - DivisionByZeroError: zero divisor/modulus, lcm(0, 0), reciprocal trig at a zero.
  - InvalidInputError: argument outside the mathematical domain, or NaN.
  - NumericOverflowError: result does not fit the documented integer width / float range.
  - EmptyInputError: statistics called on an empty sequence.
  - LoggerIOError: log directory or file could not be created/opened.
  - AlreadyInitializedError: logger bootstrap called twice in one process.
  - InvalidConfigurationError: logger or feature configuration is unusable.
  - FeatureDisabledError: a math namespace was imported without its feature enabled.
"""


class CommonKitError(Exception):
    """
    Base exception for all commonkit errors.

    **Why a common base?**
      - One except clause covers the whole library.
      - Subclasses can still be caught individually.
    """
    pass


class DivisionByZeroError(CommonKitError, ZeroDivisionError):
    """
    Raised when a divisor (or the value a reciprocal is taken of) is zero.

    **Recovery**: Check the divisor before calling, or handle the error.
    """
    pass


class InvalidInputError(CommonKitError, ValueError):
    """
    Raised when an argument lies outside the function's domain.

    Examples: factorial(-1), sqrt(-4.0), asin(2.0), NaN passed to median.
    """
    pass


class NumericOverflowError(CommonKitError, OverflowError):
    """
    Raised when a result exceeds its representable range.

    Integer results are bounded to 64-bit width (unsigned for factorial,
    signed for pow); float results are bounded by IEEE-754 double range.
    """
    pass


class EmptyInputError(CommonKitError, ValueError):
    """Raised when a statistics function receives an empty sequence."""
    pass


class LoggerIOError(CommonKitError, OSError):
    """
    Raised when the log directory or log file cannot be created or opened.

    The underlying OSError is chained as __cause__.

    **Recovery**: Fix permissions or choose another log_dir, then call the
    bootstrap again (a failed attempt leaves no global state behind).
    """
    pass


class AlreadyInitializedError(CommonKitError, RuntimeError):
    """
    Raised when the logger bootstrap is called after a successful initialization.

    **Conceptual**: The process-wide sink is installed at most once. A second
    call is reported rather than silently replacing or duplicating handlers.
    """
    pass


class InvalidConfigurationError(CommonKitError, ValueError):
    """
    Raised for unusable configuration.

    Examples: both console and file output disabled, unknown log level,
    unknown feature name in COMMONKIT_FEATURES.
    """
    pass


class FeatureDisabledError(CommonKitError, ImportError):
    """
    Raised when importing a math namespace whose feature is not enabled.

    **Recovery**: Add the feature to COMMONKIT_FEATURES (e.g. "advanced" or
    "full") in the environment or .env file before importing.
    """
    pass

"""
Configuration settings for commonkit.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). Two subsystems read
configuration:
  - Feature selection: which math namespaces may be imported.
  - Logging: where the bootstrap writes logs and what it prints to the console.

**Why centralized config?**
  - Single source of truth for every COMMONKIT_* variable.
  - Easy to test (inject fake settings instead of reading from environment).
  - Fail-fast validation (malformed boolean → clear error at startup).

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from commonkit.utils.errors import InvalidConfigurationError

# Load .env from the working directory (or a parent) if present.
# Variables already set in the environment win over the file.
load_dotenv(dotenv_path=find_dotenv(usecwd=True), override=False)

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _env_bool(name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.

    Accepts true/1/yes/on and false/0/no/off (case-insensitive).

    Raises:
        InvalidConfigurationError: If the variable is set to anything else.
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(
        f"{name} must be a boolean (true/false/1/0/yes/no/on/off), got: {raw}"
    )


@dataclass(frozen=True)
class FeatureSettings:
    """
    Configuration for feature selection.

    **Conceptual**: commonkit groups its math namespaces into features
    (basic, advanced, statistics, trigonometry, full). Only the namespaces of
    enabled features can be imported. The selection is made once, before the
    math package is imported, by setting COMMONKIT_FEATURES.

    Attributes:
        features: Comma-separated feature names (default "basic").
                 Parsed and validated by commonkit.features.parse_features.
    """
    features: str = "basic"

    @classmethod
    def from_env(cls) -> "FeatureSettings":
        """
        Load feature settings from environment variables.

        **Environment variables**:
          - COMMONKIT_FEATURES (optional): e.g. "basic,statistics" or "full".
            Defaults to "basic" if not set.

        Returns:
            FeatureSettings object with values loaded from environment.

        Usage example:
            >>> # In .env file:
            >>> # COMMONKIT_FEATURES=basic,advanced
            >>>
            >>> settings = FeatureSettings.from_env()
            >>> print(settings.features)  # "basic,advanced"
        """
        features = os.getenv("COMMONKIT_FEATURES", "").strip() or "basic"
        return cls(features=features)


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for the logger bootstrap read from the environment.

    **Conceptual**: These values seed LoggerConfig.from_env(). The level is
    special: when COMMONKIT_LOG_LEVEL is set it also overrides the level of
    any LoggerConfig passed to the bootstrap, so verbosity can be changed
    without touching code.

    Attributes:
        log_dir: Directory for the log file (default "logs").
        log_filename: Log file name (default "app.log").
        enable_console: Attach a stdout sink (default True).
        enable_file: Attach a file sink (default True).
        level: Level override (None when COMMONKIT_LOG_LEVEL is unset).
        rotation: "never", "daily" or "hourly" (default "never").
        json_format: Write the file sink as JSON lines (default False).
    """
    log_dir: str = "logs"
    log_filename: str = "app.log"
    enable_console: bool = True
    enable_file: bool = True
    level: Optional[str] = None
    rotation: str = "never"
    json_format: bool = False

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """
        Load logging settings from environment variables.

        **Environment variables** (all optional):
          - COMMONKIT_LOG_DIR: log directory (default "logs").
          - COMMONKIT_LOG_FILENAME: log file name (default "app.log").
          - COMMONKIT_LOG_CONSOLE: console output on/off (default "true").
          - COMMONKIT_LOG_FILE: file output on/off (default "true").
          - COMMONKIT_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default unset).
          - COMMONKIT_LOG_ROTATION: never/daily/hourly (default "never").
          - COMMONKIT_LOG_JSON: JSON lines in the file sink (default "false").

        Returns:
            LoggingSettings object with values loaded from environment.

        Raises:
            InvalidConfigurationError: If a boolean variable holds an unrecognised value.
        """
        return cls(
            log_dir=os.getenv("COMMONKIT_LOG_DIR", "logs"),
            log_filename=os.getenv("COMMONKIT_LOG_FILENAME", "app.log"),
            enable_console=_env_bool("COMMONKIT_LOG_CONSOLE", True),
            enable_file=_env_bool("COMMONKIT_LOG_FILE", True),
            level=cls.level_from_env(),
            rotation=os.getenv("COMMONKIT_LOG_ROTATION", "never").strip().lower(),
            json_format=_env_bool("COMMONKIT_LOG_JSON", False),
        )

    @staticmethod
    def level_from_env() -> Optional[str]:
        """
        Read only the COMMONKIT_LOG_LEVEL override, upper-cased.

        Unlike from_env(), this never parses the other COMMONKIT_LOG_*
        variables, so a malformed boolean elsewhere cannot affect it.

        Returns:
            Level name, or None when the variable is unset or blank.
        """
        level = os.getenv("COMMONKIT_LOG_LEVEL", "").strip()
        return level.upper() if level else None


@dataclass(frozen=True)
class Settings:
    """
    Global settings for commonkit.

    **Usage pattern**:
      ```python
      from commonkit.config.settings import get_settings

      settings = get_settings()
      print(settings.features.features)
      print(settings.logging.log_dir)
      ```

    Attributes:
        features: Feature selection settings.
        logging: Logger bootstrap settings.
    """
    features: FeatureSettings = FeatureSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def from_env(cls) -> "Settings":
        """Load every subsystem's settings from environment variables."""
        return cls(
            features=FeatureSettings.from_env(),
            logging=LoggingSettings.from_env(),
        )


# Lazily loaded on first get_settings() call.
# Tests can bypass this by constructing Settings(...) directly.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.
    Call reset_settings() to force a reload (tests).

    Returns:
        Global Settings singleton.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("COMMONKIT_LOG_DIR", "/tmp/x")
          reset_settings()
          assert get_settings().logging.log_dir == "/tmp/x"
      ```
    """
    global _default_settings
    _default_settings = None

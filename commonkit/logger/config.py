"""
Logger configuration: an immutable LoggerConfig and its fluent builder.

**Conceptual**: LoggerConfig is a value object. It is constructed by the
caller (directly, through the builder, or from the environment), consumed once
by init_with_config(), then discarded. It has no identity beyond its fields.

**Usage**:
  ```python
  from commonkit.logger import LoggerConfig, init_with_config

  # Defaults: logs/app.log, console on
  config = LoggerConfig()

  # Builder
  config = (
      LoggerConfig.builder()
      .log_dir("custom_logs")
      .log_filename("service.log")
      .enable_console(False)
      .level("DEBUG")
      .build()
  )

  # Environment / .env (COMMONKIT_LOG_*)
  config = LoggerConfig.from_env()

  init_with_config(config)
  ```
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

from commonkit.config.settings import LoggingSettings
from commonkit.utils.errors import InvalidConfigurationError

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_ROTATIONS = ("never", "daily", "hourly")


@dataclass(frozen=True)
class LoggerConfig:
    """
    Configuration for the process-wide logging sink.

    Attributes:
        log_dir: Directory holding the log file (created if absent).
        log_filename: Log file name inside log_dir.
        enable_console: Attach a stdout sink.
        enable_file: Attach a file sink.
        level: Minimum level name (DEBUG/INFO/WARNING/ERROR/CRITICAL).
        show_file_line: Include source file and line number in records.
        show_thread: Include the thread name in records.
        show_target: Include the logger name in records.
        use_ansi: Colour level names on the console sink (never in files).
        rotation: File rotation, "never", "daily" or "hourly".
        json_format: Write the file sink as JSON lines.

    Raises:
        InvalidConfigurationError: On construction, for an unknown level or rotation.
    """
    log_dir: str = "logs"
    log_filename: str = "app.log"
    enable_console: bool = True
    enable_file: bool = True
    level: str = "INFO"
    show_file_line: bool = False
    show_thread: bool = False
    show_target: bool = False
    use_ansi: bool = True
    rotation: str = "never"
    json_format: bool = False

    def __post_init__(self):
        """Normalise and validate level and rotation."""
        level = str(self.level).upper()
        if level not in VALID_LEVELS:
            raise InvalidConfigurationError(
                f"Unknown log level '{self.level}'. Expected one of: {', '.join(VALID_LEVELS)}"
            )
        rotation = str(self.rotation).lower()
        if rotation not in VALID_ROTATIONS:
            raise InvalidConfigurationError(
                f"Unknown rotation '{self.rotation}'. Expected one of: {', '.join(VALID_ROTATIONS)}"
            )
        object.__setattr__(self, "level", level)
        object.__setattr__(self, "rotation", rotation)

    def validate(self) -> None:
        """
        Check that the configuration can produce a sink.

        Raises:
            InvalidConfigurationError: If neither console nor file output is enabled,
                or the file sink is enabled with an empty directory or file name.
        """
        if not self.enable_console and not self.enable_file:
            raise InvalidConfigurationError(
                "Must enable at least one of file or console logging"
            )
        if self.enable_file and not self.log_filename:
            raise InvalidConfigurationError("log_filename must not be empty when file logging is enabled")
        if self.enable_file and not self.log_dir:
            raise InvalidConfigurationError("log_dir must not be empty when file logging is enabled")

    @classmethod
    def builder(cls) -> "LoggerConfigBuilder":
        """Create a builder seeded with the default values."""
        return LoggerConfigBuilder()

    @classmethod
    def from_env(cls) -> "LoggerConfig":
        """
        Build a LoggerConfig from COMMONKIT_LOG_* environment variables.

        Unset variables fall back to the LoggerConfig defaults. See
        commonkit.config.settings.LoggingSettings for the variable list.
        """
        settings = LoggingSettings.from_env()
        return cls(
            log_dir=settings.log_dir,
            log_filename=settings.log_filename,
            enable_console=settings.enable_console,
            enable_file=settings.enable_file,
            level=settings.level or "INFO",
            rotation=settings.rotation,
            json_format=settings.json_format,
        )


class LoggerConfigBuilder:
    """
    Fluent builder for LoggerConfig.

    Every setter stores the value and returns the same builder, so calls chain.
    build() creates the immutable LoggerConfig; the builder can keep being used
    afterwards without affecting configs already built.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {f.name: f.default for f in fields(LoggerConfig)}

    def _set(self, name: str, value: Any) -> "LoggerConfigBuilder":
        self._values[name] = value
        return self

    def log_dir(self, log_dir: str) -> "LoggerConfigBuilder":
        return self._set("log_dir", str(log_dir))

    def log_filename(self, filename: str) -> "LoggerConfigBuilder":
        return self._set("log_filename", str(filename))

    def enable_console(self, enable: bool) -> "LoggerConfigBuilder":
        return self._set("enable_console", bool(enable))

    def enable_file(self, enable: bool) -> "LoggerConfigBuilder":
        return self._set("enable_file", bool(enable))

    def level(self, level: str) -> "LoggerConfigBuilder":
        return self._set("level", level)

    def show_file_line(self, show: bool) -> "LoggerConfigBuilder":
        return self._set("show_file_line", bool(show))

    def show_thread(self, show: bool) -> "LoggerConfigBuilder":
        return self._set("show_thread", bool(show))

    def show_target(self, show: bool) -> "LoggerConfigBuilder":
        return self._set("show_target", bool(show))

    def use_ansi(self, use_ansi: bool) -> "LoggerConfigBuilder":
        return self._set("use_ansi", bool(use_ansi))

    def rotation(self, rotation: str) -> "LoggerConfigBuilder":
        return self._set("rotation", rotation)

    def json_format(self, enable: bool) -> "LoggerConfigBuilder":
        return self._set("json_format", bool(enable))

    def build(self) -> LoggerConfig:
        """
        Create the LoggerConfig.

        Raises:
            InvalidConfigurationError: For an unknown level or rotation.
        """
        return LoggerConfig(**self._values)

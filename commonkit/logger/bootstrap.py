"""
One-time installation of the process-wide logging sink.

**Conceptual**: The root logger is the process-wide sink every library and
application logger propagates to. This module attaches commonkit's file and
console handlers to it exactly once per process. Level filtering and record
formatting are then left to the standard logging machinery.

**State machine**:
    UNINITIALIZED → INITIALIZING → INITIALIZED   (terminal success)
    UNINITIALIZED → INITIALIZING → FAILED        (nothing installed, retry allowed)
    FAILED        → INITIALIZING → ...

**Thread safety**: One module-level lock guards the whole
check → build → install sequence. Concurrent callers therefore see exactly one
success; every other caller gets AlreadyInitializedError. A half-built sink
is never visible: handlers are attached only after all of them were created,
and handlers created by a failed attempt are closed.

**Level override**: COMMONKIT_LOG_LEVEL, when set, takes precedence over the
level in the LoggerConfig (so verbosity can change without code changes).
"""

import logging
import sys
import threading
from enum import Enum
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import List, Optional, Tuple

from commonkit.config.settings import LoggingSettings
from commonkit.logger.config import VALID_LEVELS, LoggerConfig
from commonkit.logger.formatters import JSONFormatter, TextFormatter, build_text_format
from commonkit.utils.errors import (
    AlreadyInitializedError,
    InvalidConfigurationError,
    LoggerIOError,
)

logger = logging.getLogger(__name__)

_ROTATION_WHEN = {"daily": "midnight", "hourly": "H"}


class LoggerState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"
    FAILED = "failed"


_lock = threading.Lock()
_state = LoggerState.UNINITIALIZED
_handlers: List[logging.Handler] = []
_previous_root_level: Optional[int] = None


def init_with_default() -> None:
    """
    Initialize logging with LoggerConfig defaults.

    Defaults: logs/app.log (created if absent, opened for append) plus stdout.

    Raises:
        AlreadyInitializedError: If logging was already initialized.
        LoggerIOError: If the log directory or file cannot be created/opened.
    """
    init_with_config(LoggerConfig())


def init_with_config(config: LoggerConfig) -> None:
    """
    Initialize logging with a caller-supplied configuration.

    **Steps**:
      1. Validate the configuration (at least one output enabled).
      2. Create log_dir if absent and open the log file for append (file sink).
      3. Create the stdout handler (console sink).
      4. Attach the handlers to the root logger and set its level.

    Args:
        config: LoggerConfig to apply. Consumed once; not retained.

    Raises:
        AlreadyInitializedError: If logging was already initialized in this process.
        InvalidConfigurationError: If the configuration cannot produce a sink.
        LoggerIOError: If the log directory or file cannot be created/opened.
            The original OSError is chained as __cause__.

    On any failure, no handler is left installed and the call may be retried.
    """
    global _state, _handlers, _previous_root_level

    with _lock:
        if _state is LoggerState.INITIALIZED:
            raise AlreadyInitializedError(
                "Logger has already been initialized in this process"
            )

        _state = LoggerState.INITIALIZING
        try:
            config.validate()
            level = _resolve_level(config)
            handlers = _build_handlers(config)
        except Exception:
            _state = LoggerState.FAILED
            raise

        root = logging.getLogger()
        _previous_root_level = root.level
        root.setLevel(level)
        for handler in handlers:
            root.addHandler(handler)
        _handlers = handlers
        _state = LoggerState.INITIALIZED

    logger.info(
        "Logging initialized (level=%s, console=%s, file=%s)",
        level,
        config.enable_console,
        _log_path(config) if config.enable_file else None,
    )


# Short alias for the configurable entry point.
init = init_with_config


def is_initialized() -> bool:
    """Return True once a bootstrap call has succeeded in this process."""
    return _state is LoggerState.INITIALIZED


def get_state() -> LoggerState:
    """Return the current bootstrap state."""
    return _state


def installed_handlers() -> Tuple[logging.Handler, ...]:
    """Return the handlers installed by the bootstrap (empty before success)."""
    with _lock:
        return tuple(_handlers)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)


def _resolve_level(config: LoggerConfig) -> str:
    override = LoggingSettings.level_from_env()
    if override is None:
        return config.level
    if override not in VALID_LEVELS:
        raise InvalidConfigurationError(
            f"COMMONKIT_LOG_LEVEL must be one of {', '.join(VALID_LEVELS)}, got: {override}"
        )
    return override


def _log_path(config: LoggerConfig) -> Path:
    return Path(config.log_dir) / config.log_filename


def _build_handlers(config: LoggerConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    try:
        if config.enable_file:
            handlers.append(_create_file_handler(config))
        if config.enable_console:
            handlers.append(_create_console_handler(config))
    except Exception:
        for handler in handlers:
            handler.close()
        raise
    return handlers


def _create_file_handler(config: LoggerConfig) -> logging.Handler:
    log_dir = Path(config.log_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise LoggerIOError(f"Failed to create log directory '{log_dir}': {exc}") from exc

    path = _log_path(config)
    try:
        if config.rotation == "never":
            handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        else:
            handler = TimedRotatingFileHandler(
                path, when=_ROTATION_WHEN[config.rotation], encoding="utf-8"
            )
    except OSError as exc:
        raise LoggerIOError(f"Failed to open log file '{path}': {exc}") from exc

    if config.json_format:
        handler.setFormatter(
            JSONFormatter(include_path=config.show_file_line, include_thread=config.show_thread)
        )
    else:
        # No ANSI colours in files
        fmt = build_text_format(config.show_file_line, config.show_thread, config.show_target)
        handler.setFormatter(TextFormatter(fmt, use_ansi=False))
    return handler


def _create_console_handler(config: LoggerConfig) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    fmt = build_text_format(config.show_file_line, config.show_thread, config.show_target)
    handler.setFormatter(TextFormatter(fmt, use_ansi=config.use_ansi))
    return handler


def _reset() -> None:
    """
    Remove the installed handlers and return to UNINITIALIZED (for testing).

    Production code never calls this; the sink is meant to live for the
    whole process.
    """
    global _state, _handlers, _previous_root_level

    with _lock:
        root = logging.getLogger()
        for handler in _handlers:
            root.removeHandler(handler)
            handler.close()
        if _previous_root_level is not None:
            root.setLevel(_previous_root_level)
        _handlers = []
        _previous_root_level = None
        _state = LoggerState.UNINITIALIZED

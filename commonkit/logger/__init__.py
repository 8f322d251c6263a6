"""
Logger bootstrap: configure the process-wide logging sink once.

Usage:
    >>> from commonkit.logger import init_with_default
    >>> import logging
    >>>
    >>> init_with_default()
    >>> logging.getLogger(__name__).info("Logger initialized successfully")
"""

from commonkit.logger.bootstrap import (
    LoggerState,
    get_logger,
    get_state,
    init,
    init_with_config,
    init_with_default,
    installed_handlers,
    is_initialized,
)
from commonkit.logger.config import LoggerConfig, LoggerConfigBuilder

__all__ = [
    "LoggerConfig",
    "LoggerConfigBuilder",
    "LoggerState",
    "get_logger",
    "get_state",
    "init",
    "init_with_config",
    "init_with_default",
    "installed_handlers",
    "is_initialized",
]

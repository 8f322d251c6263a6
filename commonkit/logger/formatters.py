"""Text and JSON formatters used by the logger bootstrap."""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_COLOURS = {
    "DEBUG": "\033[34m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[1;31m",
}
_RESET = "\033[0m"


def build_text_format(show_file_line: bool, show_thread: bool, show_target: bool) -> str:
    """
    Compose a logging format string from the optional record fields.

    Layout: "<time>.<ms> <LEVEL> [thread] name: file:line: message"
    """
    parts = ["%(asctime)s.%(msecs)03d", "%(levelname)5s"]
    if show_thread:
        parts.append("[%(threadName)s]")
    if show_target:
        parts.append("%(name)s:")
    if show_file_line:
        parts.append("%(filename)s:%(lineno)d:")
    parts.append("%(message)s")
    return " ".join(parts)


class TextFormatter(logging.Formatter):
    """
    Plain-text formatter with optional ANSI-coloured level names.

    Colour is applied to a copy of the level name only, so other handlers
    sharing the same record never see escape codes.
    """

    def __init__(self, fmt: str, use_ansi: bool = False):
        super().__init__(fmt=fmt, datefmt=TIME_FORMAT)
        self.use_ansi = use_ansi

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_ansi or record.levelname not in _LEVEL_COLOURS:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{_LEVEL_COLOURS[original]}{original}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Produces one JSON object per line, suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_path: bool = False,
        include_thread: bool = False,
    ):
        """
        Initialize JSON formatter.

        Args:
            include_path: Include file:line info
            include_thread: Include the thread name
        """
        super().__init__()
        self.include_path = include_path
        self.include_thread = include_thread

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }

        if self.include_thread:
            log_entry["thread"] = record.threadName

        if self.include_path:
            log_entry["path"] = f"{record.pathname}:{record.lineno}"

        message = record.getMessage()
        log_entry["message"] = message.strip() if message else ""

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, ensure_ascii=False, default=str)

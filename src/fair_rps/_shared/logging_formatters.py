# Area: Shared
"""
fair_rps._shared.logging_formatters — Logging formatters and filters
====================================================================

Contains formatter/filter classes and the console-logging flag.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Game output goes to stdout via print(); log records only reach the
# terminal when console logging is switched on (--verbose).
_console_logs_enabled = False


class ConsoleFilter(logging.Filter):
    """Filter that drops terminal log records unless console logging is on."""

    def filter(self, record: logging.LogRecord) -> bool:
        return _console_logs_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        # Work on a copy so the file handler still sees a plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def enable_console_logs() -> None:
    """Show log records on the terminal (stderr)."""
    global _console_logs_enabled
    _console_logs_enabled = True


def disable_console_logs() -> None:
    """Hide log records from the terminal; file logging is unaffected."""
    global _console_logs_enabled
    _console_logs_enabled = False


def is_console_logs_enabled() -> bool:
    """Check if console logging is enabled."""
    return _console_logs_enabled

# Area: Shared
"""
Shared utilities used by the game and the CLI.

This package contains:
- Logging configuration
- Console rendering for the rule table, menu and turn results
"""

from .console_display import (
    RESULT_PHRASES,
    CELL_LABELS,
    format_menu,
    render_rule_table,
)
from .logging_config import (
    setup_logging,
    log_startup_error,
    log_and_terminate,
)
from .logging_formatters import (
    enable_console_logs,
    disable_console_logs,
    is_console_logs_enabled,
)

__all__ = [
    "RESULT_PHRASES",
    "CELL_LABELS",
    "format_menu",
    "render_rule_table",
    "setup_logging",
    "log_startup_error",
    "log_and_terminate",
    "enable_console_logs",
    "disable_console_logs",
    "is_console_logs_enabled",
]

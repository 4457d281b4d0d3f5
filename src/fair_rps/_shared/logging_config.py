# Area: Shared
"""
fair_rps._shared.logging_config — Structured logging setup
==========================================================

Configures dual logging: terminal (colored, stderr) + file (JSON).
Terminal records are hidden unless console logging is enabled, so
they never interleave with the game's own stdout output.
Provides error logging and termination functions.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .logging_formatters import ConsoleFilter, JSONFormatter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import EntropySourceError, InvalidMoveSetError

# Package logger
logger = logging.getLogger("fair_rps")


def setup_logging(
    log_file_path: Optional[str] = None,
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON log file. No file handler is added when None.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("fair_rps")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(ConsoleFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_startup_error(error: "InvalidMoveSetError | EntropySourceError") -> None:
    """
    Print a startup error block to stderr and record it in the log.

    Parameters
    ----------
    error : InvalidMoveSetError or EntropySourceError
        Any error that provides format_error_log().
    """
    # Print to terminal (bypassing logger for exact formatting)
    print(error.format_error_log(), file=sys.stderr)

    logger.error(f"Startup error: {error.__class__.__name__}: {error}")


def log_and_terminate(error: "EntropySourceError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : EntropySourceError
        The fatal error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    log_startup_error(error)
    logger.critical("Process terminated due to fatal error")
    sys.exit(exit_code)

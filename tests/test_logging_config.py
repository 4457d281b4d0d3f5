# Area: Shared Tests
"""Tests for logging setup and formatters."""

import json
import logging

import pytest

from fair_rps._shared import logging_formatters
from fair_rps._shared.logging_config import log_and_terminate, setup_logging
from fair_rps._shared.logging_formatters import (
    ConsoleFilter,
    JSONFormatter,
    TerminalFormatter,
    disable_console_logs,
    enable_console_logs,
    is_console_logs_enabled,
)
from fair_rps.errors import EntropySourceError


@pytest.fixture(autouse=True)
def reset_console_flag():
    disable_console_logs()
    yield
    disable_console_logs()


def _record(msg="hello", level=logging.INFO):
    return logging.LogRecord("fair_rps.test", level, __file__, 1, msg, None, None)


class TestConsoleFilter:
    def test_hidden_by_default(self):
        assert is_console_logs_enabled() is False
        assert ConsoleFilter().filter(_record()) is False

    def test_enable_and_disable(self):
        enable_console_logs()
        assert ConsoleFilter().filter(_record()) is True
        disable_console_logs()
        assert logging_formatters._console_logs_enabled is False


class TestFormatters:
    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(_record("turn done")))
        assert data["message"] == "turn done"
        assert data["level"] == "INFO"
        assert data["logger"] == "fair_rps.test"
        assert "timestamp" in data

    def test_terminal_formatter_colors_level(self):
        record = _record()
        text = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[32mINFO\033[0m hello" == text
        # the original record is untouched for other handlers
        assert record.levelname == "INFO"


class TestSetupLogging:
    def test_handlers(self, tmp_path):
        log_file = tmp_path / "nested" / "fair.log"
        setup_logging(str(log_file), level=logging.DEBUG)
        pkg_logger = logging.getLogger("fair_rps")
        assert pkg_logger.propagate is False
        assert len(pkg_logger.handlers) == 2
        logging.getLogger("fair_rps.game").info("created")
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "created"

    def test_no_file_handler_without_path(self):
        setup_logging(None)
        assert len(logging.getLogger("fair_rps").handlers) == 1

    def test_terminal_quiet_by_default(self, capsys):
        setup_logging(None)
        logging.getLogger("fair_rps.cli").warning("should not show")
        assert "should not show" not in capsys.readouterr().err


class TestLogAndTerminate:
    def test_exits_with_code(self, capsys):
        setup_logging(None)
        with pytest.raises(SystemExit) as exc_info:
            log_and_terminate(EntropySourceError(OSError("x")), exit_code=3)
        assert exc_info.value.code == 3
        assert "ENTROPY SOURCE FAILURE" in capsys.readouterr().err

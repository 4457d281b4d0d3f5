# Area: Shared Tests
"""Tests for exception classes and error block formatting."""

from fair_rps.errors import (
    EntropySourceError,
    FairRPSError,
    InvalidMoveError,
    InvalidMoveSelectionError,
    InvalidMoveSetError,
)
from fair_rps.error_formatter import USAGE_EXAMPLE, format_error_block


class TestHierarchy:
    def test_all_derive_from_base(self):
        for cls in (
            InvalidMoveSetError,
            InvalidMoveSelectionError,
            InvalidMoveError,
            EntropySourceError,
        ):
            assert issubclass(cls, FairRPSError)


class TestInvalidMoveSetError:
    """Tests for the startup usage error."""

    def test_error_block_contains_usage_example(self):
        error = InvalidMoveSetError(
            ["rock", "paper"], InvalidMoveSetError.EVEN_MOVE_COUNT, "odd count required"
        )
        block = error.format_error_log()
        assert "EVEN_MOVE_COUNT" in block
        assert "odd count required" in block
        assert f"Example: {USAGE_EXAMPLE}" in block
        assert '"rock"' in block

    def test_duplicates_listed(self):
        error = InvalidMoveSetError(
            ["rock", "rock", "paper"], InvalidMoveSetError.DUPLICATE_MOVES, "dup"
        )
        assert error.duplicates == ["rock"]
        assert '"duplicates"' in error.format_error_log()


class TestOtherErrors:
    def test_selection_message(self):
        error = InvalidMoveSelectionError("abc", 5)
        assert str(error) == "Invalid input. Please enter a number between 0 and 5."
        assert error.raw_input == "abc"

    def test_invalid_move_message(self):
        error = InvalidMoveError("well", ["rock", "paper", "scissors"])
        assert "'well'" in str(error)
        assert "rock, paper, scissors" in str(error)

    def test_entropy_error_block(self):
        error = EntropySourceError(OSError("gone"))
        block = error.format_error_log()
        assert "ENTROPY_SOURCE_FAILURE" in block
        assert "OSError" in block


class TestFormatErrorBlock:
    def test_minimal_block(self):
        block = format_error_block("TITLE", "SOME_TYPE", "something broke")
        lines = block.splitlines()
        assert " TITLE" in lines
        assert " Error Type:   SOME_TYPE" in lines
        assert " Reason:       something broke" in lines
        assert "DETAILS" not in block
        assert "USAGE" not in block

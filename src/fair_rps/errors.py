"""
fair_rps.errors — Custom exception classes
==========================================

Defines the exception hierarchy for the game.
Startup errors carry enough context to render a structured error block.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Sequence

from .error_formatter import format_error_block, usage_lines


class FairRPSError(Exception):
    """Base exception for all fair_rps errors."""
    pass


class InvalidMoveSetError(FairRPSError):
    """Raised when the move list is too short, even-length, or has duplicates."""

    TOO_FEW_MOVES = "TOO_FEW_MOVES"
    EVEN_MOVE_COUNT = "EVEN_MOVE_COUNT"
    DUPLICATE_MOVES = "DUPLICATE_MOVES"

    def __init__(self, moves: Sequence[str], reason: str, message: str):
        self.moves = list(moves)
        self.reason = reason
        self.message = message
        super().__init__(message)

    @property
    def duplicates(self) -> List[str]:
        return [m for m, count in Counter(self.moves).items() if count > 1]

    def format_error_log(self) -> str:
        details = {"moves": self.moves, "count": len(self.moves)}
        if self.reason == self.DUPLICATE_MOVES:
            details["duplicates"] = self.duplicates
        return format_error_block(
            title="INVALID ARGUMENTS — GAME NOT STARTED",
            error_type=self.reason,
            message=self.message,
            details=details,
            usage_lines=usage_lines(),
        )


class InvalidMoveSelectionError(FairRPSError):
    """Raised when a menu entry is non-numeric or out of range. Recoverable."""

    def __init__(self, raw_input: str, max_choice: int):
        self.raw_input = raw_input
        self.max_choice = max_choice
        self.message = (
            f"Invalid input. Please enter a number between 0 and {max_choice}."
        )
        super().__init__(self.message)


class InvalidMoveError(FairRPSError):
    """Raised when Game.play() receives a move outside the game's move set."""

    def __init__(self, move: str, moves: Sequence[str]):
        self.move = move
        self.moves = list(moves)
        super().__init__(
            f"Move {move!r} is not one of: {', '.join(self.moves)}"
        )


class EntropySourceError(FairRPSError):
    """Raised when the OS random source cannot produce key material."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Entropy source failure: {type(cause).__name__}: {cause}")

    def format_error_log(self) -> str:
        return format_error_block(
            title="ENTROPY SOURCE FAILURE — PROCESS TERMINATED",
            error_type="ENTROPY_SOURCE_FAILURE",
            message=str(self),
            details={"cause": type(self.cause).__name__},
        )

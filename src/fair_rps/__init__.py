"""
fair_rps — Provably fair generalized rock-paper-scissors
========================================================

Play any odd number (>= 3) of unique moves against the computer. The
computer commits to its move with an HMAC before you choose, then
reveals its move and the key so you can check it did not cheat.

Quick Start:
    $ fair-rps rock paper scissors lizard spock

From Python:
    from fair_rps import Game
    game = Game(["rock", "paper", "scissors"])
    game.print_rules()
    print("HMAC:", game.begin_turn())
    outcome = game.play("rock")

Verify a turn:
    from fair_rps import verify_commitment
    verify_commitment(outcome.key, outcome.computer_move, outcome.commitment)
"""

from .game import Game
from ._core import (
    KeyPolicy,
    Outcome,
    TurnOutcome,
    calculate_commitment,
    generate_key,
    generate_rules,
    verify_commitment,
)
from .errors import (
    FairRPSError,
    InvalidMoveSetError,
    InvalidMoveSelectionError,
    InvalidMoveError,
    EntropySourceError,
)
from .types import RuleEntry, RuleTable

__all__ = [
    # Main classes
    "Game",
    "KeyPolicy",
    "Outcome",
    "TurnOutcome",
    # Core functions
    "calculate_commitment",
    "generate_key",
    "generate_rules",
    "verify_commitment",
    # Errors
    "FairRPSError",
    "InvalidMoveSetError",
    "InvalidMoveSelectionError",
    "InvalidMoveError",
    "EntropySourceError",
    # Types
    "RuleEntry",
    "RuleTable",
]
__version__ = "1.0.0"

# Area: Core
"""
fair_rps._core.turn_outcome — Turn Outcome Dataclass
====================================================

Defines the TurnOutcome dataclass returned by Game.play(). It carries
everything a player needs to verify the turn after the fact.
"""

from dataclasses import dataclass

from .enums import Outcome


@dataclass(frozen=True)
class TurnOutcome:
    """
    Complete record of one resolved turn.

    Attributes:
        turn_number: 1-based turn counter within the game
        user_move: Move chosen by the human player
        computer_move: Move the computer committed to
        commitment: HMAC shown before the reveal
        key: Key revealed after the turn (verifies the commitment)
        outcome: Result from the human player's perspective
    """

    turn_number: int
    user_move: str
    computer_move: str
    commitment: str
    key: str
    outcome: Outcome

# Area: Core
"""
fair_rps._core.enums — Game enums
=================================

Outcomes, turn states/events for the turn state machine, and the
session key policy.
"""

from enum import Enum


class Outcome(Enum):
    """Result of a turn, from the human player's perspective."""
    DRAW = "draw"
    WIN = "win"
    LOSE = "lose"


class TurnState(Enum):
    """
    States of the turn state machine.

    State transitions:
    IDLE -> TURN_IN_PROGRESS (on COMMIT)
    TURN_IN_PROGRESS -> IDLE (on REVEAL)
    """
    IDLE = "IDLE"
    TURN_IN_PROGRESS = "TURN_IN_PROGRESS"


class TurnEvent(Enum):
    """
    Events that trigger turn state transitions.

    - COMMIT: computer move drawn and its HMAC computed
    - REVEAL: result, computer move and key shown to the player
    """
    COMMIT = "COMMIT"
    REVEAL = "REVEAL"


class KeyPolicy(Enum):
    """How long a single HMAC key is used for."""
    SESSION = "session"     # one key for every turn of the game
    TURN = "turn"           # fresh key generated at the start of each turn

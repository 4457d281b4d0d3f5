# Area: Core
"""
Core game logic: rules, keys, commitments and the turn state machine.
"""

from .commitment import calculate_commitment, verify_commitment
from .enums import KeyPolicy, Outcome, TurnEvent, TurnState
from .keygen import MIN_KEY_BYTES, generate_key
from .rules import beats, generate_rules
from .state_machine import TurnStateMachine
from .turn_outcome import TurnOutcome

__all__ = [
    "calculate_commitment",
    "verify_commitment",
    "KeyPolicy",
    "Outcome",
    "TurnEvent",
    "TurnState",
    "MIN_KEY_BYTES",
    "generate_key",
    "beats",
    "generate_rules",
    "TurnStateMachine",
    "TurnOutcome",
]

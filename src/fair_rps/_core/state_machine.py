# Area: Core
"""
fair_rps._core.state_machine — Turn State Machine
=================================================

Tracks whether a turn is in progress: the computer has committed to
a move (HMAC shown) but the result and key have not been revealed yet.
"""

import logging

from .enums import TurnState, TurnEvent

logger = logging.getLogger("fair_rps.core.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    TurnState.IDLE: {
        TurnEvent.COMMIT: TurnState.TURN_IN_PROGRESS,
    },
    TurnState.TURN_IN_PROGRESS: {
        TurnEvent.REVEAL: TurnState.IDLE,
    },
}


class TurnStateMachine:
    """
    State machine for a single game's turns.

    Attributes:
        current_state: The current state of the state machine
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_state = TurnState.IDLE

    def can_transition(self, event: TurnEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_state, {})
        return event in valid_transitions

    def transition(self, event: TurnEvent) -> TurnState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        logger.debug(f"Turn: {self.current_state.value} → {next_state.value}")
        self.current_state = next_state
        return next_state

    def reset(self) -> None:
        """Reset state machine to IDLE."""
        self.current_state = TurnState.IDLE

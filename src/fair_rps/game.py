# Area: Game
"""
fair_rps.game — Game session
============================

A Game owns the move set, the derived rule table, the HMAC key and the
randomness source used to pick the computer's move.

A turn has two halves:

    commitment = game.begin_turn()   # computer move fixed, HMAC to show
    outcome = game.play("rock")      # result, computer move and key revealed

play() starts a turn on its own when begin_turn() was not called first.
"""

from __future__ import annotations
import logging
import random
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from ._config import validate_moves
from ._core.commitment import calculate_commitment
from ._core.enums import KeyPolicy, Outcome, TurnEvent, TurnState
from ._core.keygen import MIN_KEY_BYTES, generate_key
from ._core.rules import beats, generate_rules
from ._core.state_machine import TurnStateMachine
from ._core.turn_outcome import TurnOutcome
from ._shared.console_display import CELL_LABELS, CORNER_LABEL, RESULT_PHRASES, render_rule_table
from .errors import InvalidMoveError
from .types import RuleTable

logger = logging.getLogger("fair_rps.game")


class Game:
    """
    One game session between the human player and the computer.

    Args:
        moves: Ordered move set (odd length >= 3, unique)
        rng: Source for the computer's move; defaults to random.SystemRandom().
            Pass random.Random(seed) for reproducible move sequences.
        key_policy: Rotate the key every turn (default) or reuse one key for
            the session. Under SESSION the commitment must only be shown
            after the player has chosen, since earlier reveals expose the key.
        key_bytes: Size of each generated key in bytes
        stream: Where turn output is written; defaults to sys.stdout

    Raises:
        InvalidMoveSetError: If `moves` is not a valid move set
        EntropySourceError: If the initial key cannot be generated
    """

    def __init__(
        self,
        moves: Sequence[str],
        rng: Optional[random.Random] = None,
        key_policy: KeyPolicy = KeyPolicy.TURN,
        key_bytes: int = MIN_KEY_BYTES,
        stream: Optional[TextIO] = None,
    ):
        validate_moves(moves)
        self._moves: Tuple[str, ...] = tuple(moves)
        self._rules: RuleTable = generate_rules(self._moves)
        self._rng = rng if rng is not None else random.SystemRandom()
        self._key_policy = key_policy
        self._key_bytes = key_bytes
        self._key = generate_key(key_bytes)
        self._stream = stream
        self._state = TurnStateMachine()
        self._pending_move: Optional[str] = None
        self._pending_commitment: Optional[str] = None
        self._turns_played = 0
        logger.info(
            f"Game created: {len(self._moves)} moves, key policy {key_policy.value}"
        )

    # ── Properties ───────────────────────────────────────────

    @property
    def moves(self) -> Tuple[str, ...]:
        return self._moves

    @property
    def rules(self) -> RuleTable:
        return {
            move: {"win": list(entry["win"]), "lose": list(entry["lose"])}
            for move, entry in self._rules.items()
        }

    @property
    def key(self) -> str:
        return self._key

    @property
    def key_policy(self) -> KeyPolicy:
        return self._key_policy

    @property
    def turn_in_progress(self) -> bool:
        return self._state.current_state == TurnState.TURN_IN_PROGRESS

    @property
    def turns_played(self) -> int:
        return self._turns_played

    @property
    def stream(self) -> TextIO:
        """Where turn output goes: the stream given at construction, else sys.stdout."""
        return self._stream if self._stream is not None else sys.stdout

    # ── Turn flow ────────────────────────────────────────────

    def begin_turn(self) -> str:
        """
        Commit to a computer move and return its HMAC.

        Idempotent while a turn is in progress: the same commitment is
        returned until the turn is resolved by play(). Under KeyPolicy.TURN
        every turn after the first gets a fresh key, so the key revealed
        for the previous turn says nothing about this commitment.
        """
        if self.turn_in_progress:
            return self._pending_commitment

        if self._key_policy == KeyPolicy.TURN and self._turns_played > 0:
            self._key = generate_key(self._key_bytes)

        self._pending_move = self._rng.choice(self._moves)
        self._pending_commitment = calculate_commitment(self._key, self._pending_move)
        self._state.transition(TurnEvent.COMMIT)
        logger.debug(f"Turn {self._turns_played + 1} committed")
        return self._pending_commitment

    def play(self, user_move: str) -> TurnOutcome:
        """
        Resolve a turn against `user_move` and print the reveal.

        The HMAC line is printed here only when this call opened the turn;
        a commitment from an earlier begin_turn() was already shown.

        Raises:
            InvalidMoveError: If `user_move` is not in the move set
        """
        if user_move not in self._moves:
            raise InvalidMoveError(user_move, self._moves)

        opened_here = not self.turn_in_progress
        commitment = self.begin_turn()
        computer_move = self._pending_move

        self._emit(f"Your move: {user_move}")
        if opened_here:
            self._emit(f"HMAC: {commitment}")

        outcome = self.determine_result(user_move, computer_move)

        self._emit(f"Computer move: {computer_move}")
        self._emit(RESULT_PHRASES[outcome])
        self._emit(f"HMAC key: {self._key}")

        self._state.transition(TurnEvent.REVEAL)
        self._turns_played += 1
        self._pending_move = None
        self._pending_commitment = None
        logger.info(
            f"Turn {self._turns_played}: {user_move} vs {computer_move} → {outcome.value}"
        )
        return TurnOutcome(
            turn_number=self._turns_played,
            user_move=user_move,
            computer_move=computer_move,
            commitment=commitment,
            key=self._key,
            outcome=outcome,
        )

    def determine_result(self, user_move: str, computer_move: str) -> Outcome:
        """Outcome of `user_move` against `computer_move` for the human player."""
        if user_move == computer_move:
            return Outcome.DRAW
        if beats(self._rules, user_move, computer_move):
            return Outcome.WIN
        return Outcome.LOSE

    # ── Rules display ────────────────────────────────────────

    def rule_grid(self) -> List[List[str]]:
        """(N+1)x(N+1) grid: header row, then one row per move."""
        grid = [[CORNER_LABEL, *self._moves]]
        for move in self._moves:
            row = [move]
            for other in self._moves:
                row.append(CELL_LABELS[self.determine_result(move, other)])
            grid.append(row)
        return grid

    def print_rules(self) -> str:
        """Print the rule table and return the rendered text."""
        table = render_rule_table(self.rule_grid())
        self._emit(table)
        return table

    def _emit(self, line: str) -> None:
        print(line, file=self.stream)

# Area: Core
"""
fair_rps._core.rules — Win/lose rule generation
===============================================

Builds the circular rule table for an odd-length list of moves.
Each move beats the (N-1)/2 moves that follow it (wrapping around)
and loses to the (N-1)/2 moves that precede it.

    >>> generate_rules(["rock", "paper", "scissors"])["rock"]
    {'win': ['paper'], 'lose': ['scissors']}
"""

from __future__ import annotations
from typing import Dict, Sequence

from ..types import RuleEntry


def generate_rules(moves: Sequence[str]) -> Dict[str, RuleEntry]:
    """
    Compute the rule table for a validated move set.

    Args:
        moves: Ordered, duplicate-free moves of odd length >= 3

    Returns:
        Mapping of move -> {"win": [...], "lose": [...]}
    """
    rules: Dict[str, RuleEntry] = {}
    n = len(moves)
    for i, move in enumerate(moves):
        win = []
        lose = []
        for j in range(1, n // 2 + 1):
            win.append(moves[(i + j) % n])
            lose.append(moves[(i - j + n) % n])
        rules[move] = {"win": win, "lose": lose}
    return rules


def beats(rules: Dict[str, RuleEntry], move: str, other: str) -> bool:
    """True if `move` beats `other` under `rules`."""
    return other in rules[move]["win"]

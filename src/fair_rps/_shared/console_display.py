# Area: Shared
"""
fair_rps._shared.console_display — Console rendering for the game
=================================================================

Display constants plus the rule table and menu formatting used by
Game and the CLI.
"""

from __future__ import annotations
from typing import List, Sequence

from tabulate import tabulate

from .._core.enums import Outcome

# ══════════════════════════════════════════════════════════════
# OUTCOME → TEXT MAPPINGS
# ══════════════════════════════════════════════════════════════

# Printed after each turn
RESULT_PHRASES = {
    Outcome.DRAW: "It's a draw!",
    Outcome.WIN: "You win!",
    Outcome.LOSE: "You lose!",
}

# Rule table cells (row move vs column move)
CELL_LABELS = {
    Outcome.DRAW: "Draw",
    Outcome.WIN: "Win",
    Outcome.LOSE: "Lose",
}

CORNER_LABEL = "User \\ PC"
TABLE_FORMAT = "grid"

MENU_TITLE = "Available moves:"
EXIT_LABEL = "exit"
PROMPT = "Enter your move: "


def render_rule_table(grid: Sequence[Sequence[str]]) -> str:
    """Render an (N+1)x(N+1) rule grid whose first row is the header."""
    header, *rows = grid
    return tabulate(rows, headers=header, tablefmt=TABLE_FORMAT)


def format_menu(moves: Sequence[str]) -> List[str]:
    """Numbered menu lines: 1..N for moves, 0 to exit."""
    lines = [MENU_TITLE]
    lines.extend(f"{i} - {move}" for i, move in enumerate(moves, start=1))
    lines.append(f"0 - {EXIT_LABEL}")
    return lines

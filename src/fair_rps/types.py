"""
fair_rps.types — TypedDict schemas for rule tables
==================================================

Use __annotations__ to inspect fields:

    >>> RuleEntry.__annotations__
    {'win': typing.List[str], 'lose': typing.List[str]}
"""

from typing import Dict, List, TypedDict


class RuleEntry(TypedDict):
    """Win/lose sets for one move.

    Fields
    ------
    win : List[str]
        Moves this move beats, in cyclic offset order.
    lose : List[str]
        Moves this move loses to, in cyclic offset order.
    """
    win: List[str]
    lose: List[str]


RuleTable = Dict[str, RuleEntry]

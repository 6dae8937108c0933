"""Attacker movement model.

From any cell the attacker may step up, down, left, right, up-right or
down-right. Up-left and down-left are deliberately absent: the start sits on
the left edge and the goal on the right, so movement is biased rightward.

The order of :data:`ATTACKER_DIRECTIONS` is significant. The search pushes
neighbours in this order and breaks priority ties by insertion, so reordering
changes which of several equal-cost routes is reported.
"""

from typing import List, Tuple

from strategic_defense.components import Position
from strategic_defense.state import State
from strategic_defense.utils.grid import is_in_bounds

Direction = Tuple[int, int]  # (d_row, d_col)

UP: Direction = (-1, 0)
DOWN: Direction = (1, 0)
LEFT: Direction = (0, -1)
RIGHT: Direction = (0, 1)
UP_RIGHT: Direction = (-1, 1)
DOWN_RIGHT: Direction = (1, 1)

ATTACKER_DIRECTIONS: Tuple[Direction, ...] = (
    UP,
    DOWN,
    LEFT,
    RIGHT,
    UP_RIGHT,
    DOWN_RIGHT,
)


def neighbors(state: State, pos: Position) -> List[Position]:
    """In-bounds cells one attacker move away from ``pos``.

    Tower cells are included; the caller prices them through the cost function.
    """
    out: List[Position] = []
    for d_row, d_col in ATTACKER_DIRECTIONS:
        candidate = Position(pos.row + d_row, pos.col + d_col)
        if is_in_bounds(state, candidate):
            out.append(candidate)
    return out


def is_adjacent(a: Position, b: Position) -> bool:
    """Return True if ``b`` is one attacker move away from ``a``."""
    return (b.row - a.row, b.col - a.col) in ATTACKER_DIRECTIONS

"""Grid math and classification helpers.

Pure predicates and lookups over a :class:`State`. Functions here are small
and called from inner search loops, so they avoid building intermediate
collections.
"""

from typing import Iterable

from strategic_defense.components import Position
from strategic_defense.state import State
from strategic_defense.types import CellType, Phase


def manhattan_distance(a: Position, b: Position) -> int:
    """Return ``|dr| + |dc|`` between two cells."""
    return abs(a.row - b.row) + abs(a.col - b.col)


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the board rectangle."""
    return 0 <= pos.row < state.rows and 0 <= pos.col < state.cols


def check_bounds(state: State, pos: Position) -> None:
    if not is_in_bounds(state, pos):
        raise IndexError(
            f"Out of bounds: {(pos.row, pos.col)} for board {state.rows}x{state.cols}"
        )


def classify(state: State, pos: Position) -> CellType:
    """Return the layout classification of ``pos``.

    Raises:
        IndexError: If ``pos`` is outside the board.
    """
    check_bounds(state, pos)
    return state.cells.get(pos, CellType.EMPTY)


def display_cell(state: State, pos: Position) -> CellType:
    """Classification as shown to the player.

    Same as :func:`classify`, except an empty cell holding the battle token
    reads as ``ENEMY``.
    """
    cell_type = classify(state, pos)
    if cell_type == CellType.EMPTY and state.enemy == pos:
        return CellType.ENEMY
    return cell_type


def can_place_tower(state: State, pos: Position) -> bool:
    """Return True if a tower may be placed at ``pos`` right now."""
    return (
        state.phase == Phase.SETUP
        and is_in_bounds(state, pos)
        and classify(state, pos) == CellType.EMPTY
    )


def is_within(pos: Position, others: Iterable[Position], radius: int) -> bool:
    """Return True if any of ``others`` lies within Manhattan ``radius`` of ``pos``."""
    return any(manhattan_distance(pos, other) <= radius for other in others)


def all_positions(state: State) -> Iterable[Position]:
    """Yield every board cell in row-major order."""
    for row in range(state.rows):
        for col in range(state.cols):
            yield Position(row, col)

"""Round construction and reset.

:func:`new_round` stamps the start and end cells onto an empty board and
returns a ``setup`` phase :class:`State`. :func:`reset` rebuilds a round with
the same board geometry, discarding towers, analysis and battle progress.
"""

from typing import Optional, Tuple

from pyrsistent import pmap, pset

from strategic_defense.components import Position
from strategic_defense.constants import BOARD_COLS, BOARD_ROWS, END_CELL, START_CELL
from strategic_defense.state import State
from strategic_defense.types import CellType
from strategic_defense.utils.logger import get_logger

logger = get_logger(__name__)


def new_round(
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    start: Optional[Tuple[int, int]] = None,
    end: Optional[Tuple[int, int]] = None,
) -> State:
    """Create a fresh round in the ``setup`` phase.

    Args:
        rows: Board height. Defaults to the standard 8-row board.
        cols: Board width. Defaults to the standard 10-column board.
        start: ``(row, col)`` of the attacker spawn. Defaults to ``(3, 0)``.
        end: ``(row, col)`` of the attacker goal. Defaults to ``(4, 9)``.

    Returns:
        State: Board with only ``start`` and ``end`` classified.

    Raises:
        ValueError: If the board is empty, or start/end are out of bounds or coincide.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Board must have positive size, got {rows}x{cols}")

    start_pos = Position(*(start if start is not None else START_CELL))
    end_pos = Position(*(end if end is not None else END_CELL))
    for name, pos in (("start", start_pos), ("end", end_pos)):
        if not (0 <= pos.row < rows and 0 <= pos.col < cols):
            raise ValueError(f"{name} cell {pos} is outside the {rows}x{cols} board")
    if start_pos == end_pos:
        raise ValueError("start and end must be different cells")

    return State(
        rows=rows,
        cols=cols,
        start=start_pos,
        end=end_pos,
        cells=pmap({start_pos: CellType.START, end_pos: CellType.END}),
        towers=pset(),
    )


def reset(state: State) -> State:
    """Return a new round on the same board (idempotent)."""
    logger.info("Resetting round (%d towers discarded)", len(state.towers))
    return new_round(
        rows=state.rows,
        cols=state.cols,
        start=(state.start.row, state.start.col),
        end=(state.end.row, state.end.col),
    )

"""Tower placement system.

Placing a tower reclassifies an empty cell as ``tower`` and adds it to the
tower index. Requests that fail :func:`can_place_tower` (wrong phase, out of
bounds, occupied cell) are ignored and the input state is returned unchanged.
"""

from dataclasses import replace

from strategic_defense.components import Position
from strategic_defense.state import State
from strategic_defense.types import CellType
from strategic_defense.utils.grid import can_place_tower
from strategic_defense.utils.logger import get_logger

logger = get_logger(__name__)


def place_tower_system(state: State, pos: Position) -> State:
    """Place a tower at ``pos`` if allowed.

    Args:
        state (State): Current state.
        pos (Position): Target cell.

    Returns:
        State: Same state if the placement is invalid, otherwise a state with
            the tower recorded and ``analyzing`` set until the next analysis.
    """
    if not can_place_tower(state, pos):
        logger.debug("Ignoring tower placement at %s in phase %s", pos, state.phase)
        return state

    return replace(
        state,
        cells=state.cells.set(pos, CellType.TOWER),
        towers=state.towers.add(pos),
        analyzing=True,
    )

"""Tower-influence cost function.

Every cell the attacker enters has a traversal cost. Towers are impassable;
the goal always costs one so a structurally reachable goal is never priced
out. Any other cell costs one plus a penalty from each tower within
``TOWER_COST_RADIUS``: ``3`` at distance 0, ``2`` at distance 1, ``1`` at
distance 2. Penalties from several towers add up, so clustering towers
compounds the pressure on the cells between them.
"""

import math
from typing import Iterable

from strategic_defense.components import Position
from strategic_defense.constants import (
    BASE_MOVE_COST,
    TOWER_COST_RADIUS,
    TOWER_COST_WEIGHT,
)
from strategic_defense.state import State
from strategic_defense.types import CellType
from strategic_defense.utils.grid import classify, manhattan_distance


def tower_influence(pos: Position, tower: Position) -> int:
    """Extra cost a single tower adds to ``pos`` (0 beyond the radius)."""
    distance = manhattan_distance(pos, tower)
    if distance > TOWER_COST_RADIUS:
        return 0
    return max(0, TOWER_COST_WEIGHT - distance)


def tower_pressure(pos: Position, towers: Iterable[Position]) -> int:
    """Summed influence of ``towers`` on ``pos``."""
    return sum(tower_influence(pos, tower) for tower in towers)


def move_cost(state: State, pos: Position) -> float:
    """Cost of entering ``pos`` given the current tower placement.

    Returns:
        float: ``math.inf`` for tower cells, ``1`` for the goal, otherwise
            ``1 + tower_pressure``.
    """
    cell_type = classify(state, pos)
    if cell_type == CellType.TOWER:
        return math.inf
    if cell_type == CellType.END:
        return BASE_MOVE_COST
    return BASE_MOVE_COST + tower_pressure(pos, state.towers)

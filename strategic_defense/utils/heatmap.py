"""Board-wide cost arrays.

Vectorized views of the cost function for rendering and inspection. Values
match :func:`strategic_defense.systems.cost.move_cost` cell for cell.
"""

import numpy as np
import numpy.typing as npt

from strategic_defense.state import State
from strategic_defense.systems.cost import move_cost
from strategic_defense.utils.grid import all_positions

FloatArray = npt.NDArray[np.float64]


def cost_map(state: State) -> FloatArray:
    """``rows x cols`` array of move costs (``inf`` on towers)."""
    costs: FloatArray = np.ones((state.rows, state.cols), dtype=np.float64)
    for pos in all_positions(state):
        costs[pos.row, pos.col] = move_cost(state, pos)
    return costs


def pressure_map(state: State) -> FloatArray:
    """Tower pressure normalized to ``[0, 1]`` over passable cells.

    Towers read as 1. A board without pressure is all zeros.
    """
    costs = cost_map(state)
    passable = np.isfinite(costs)
    pressure: FloatArray = np.where(passable, costs - 1.0, 0.0)
    peak = float(pressure.max()) if pressure.size else 0.0
    if peak > 0.0:
        pressure = pressure / peak
    pressure[~passable] = 1.0
    return pressure

"""Fixed board policy.

These values describe the one board the game is played on. They are not user
settings; the search, cost and scoring rules are tuned against them.
"""

from typing import Tuple

BOARD_ROWS = 8
BOARD_COLS = 10

# (row, col)
START_CELL: Tuple[int, int] = (3, 0)
END_CELL: Tuple[int, int] = (4, 9)

# Cost function: cells within this Manhattan radius of a tower pay
# ``TOWER_COST_WEIGHT - distance`` extra per tower.
TOWER_COST_RADIUS = 2
TOWER_COST_WEIGHT = 3
BASE_MOVE_COST = 1

# Difficulty scorer: each (path cell, tower) pair within this radius adds
# ``DIFFICULTY_WEIGHT - DIFFICULTY_FALLOFF * distance``.
DIFFICULTY_RADIUS = 3
DIFFICULTY_WEIGHT = 10
DIFFICULTY_FALLOFF = 2
MAX_DIFFICULTY = 100

# Cells within this radius of a tower are highlighted as threatened.
THREAT_RADIUS = 2

# The search stops after this many complete start->end candidates.
MAX_CANDIDATE_PATHS = 10

# Pacing for interactive play, in seconds.
ANALYSIS_DELAY = 1.0
BATTLE_STEP_DELAY = 0.8

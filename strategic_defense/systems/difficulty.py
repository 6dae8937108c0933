"""Path difficulty scoring.

Difficulty measures how much defensive pressure a path runs through. Each
(path cell, tower) pair within ``DIFFICULTY_RADIUS`` contributes
``10 - 2 * distance``; the sum is capped at 100. A score of 0 is an
undefended route. The player sees the inverse as a success rate.
"""

from typing import Iterable, Sequence

from strategic_defense.components import Position
from strategic_defense.constants import (
    DIFFICULTY_FALLOFF,
    DIFFICULTY_RADIUS,
    DIFFICULTY_WEIGHT,
    MAX_DIFFICULTY,
    THREAT_RADIUS,
)
from strategic_defense.types import StrategyLabel
from strategic_defense.utils.grid import is_within, manhattan_distance


def path_difficulty(path: Sequence[Position], towers: Iterable[Position]) -> int:
    """Score ``path`` against ``towers``, clamped to ``[0, 100]``."""
    towers = tuple(towers)
    difficulty = 0
    for pos in path:
        for tower in towers:
            distance = manhattan_distance(pos, tower)
            if distance <= DIFFICULTY_RADIUS:
                difficulty += max(0, DIFFICULTY_WEIGHT - DIFFICULTY_FALLOFF * distance)
    return min(MAX_DIFFICULTY, difficulty)


def success_rate(difficulty: int) -> int:
    """Attacker success percentage shown to the player."""
    return max(0, MAX_DIFFICULTY - difficulty)


def strategy_label(difficulty: int) -> StrategyLabel:
    if difficulty > 70:
        return StrategyLabel.HEAVY
    if difficulty > 40:
        return StrategyLabel.MODERATE
    if difficulty > 20:
        return StrategyLabel.LIGHT
    return StrategyLabel.CLEAR


def is_near_tower(pos: Position, towers: Iterable[Position]) -> bool:
    """Return True if a tower is within threat range of ``pos``."""
    return is_within(pos, towers, THREAT_RADIUS)

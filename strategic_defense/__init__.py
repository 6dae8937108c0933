"""strategic_defense
=================

Grid tower-defense core: players place towers on a fixed board and an
automated attacker searches for the cheapest route from start to end, biased
away from tower influence.

The engine follows a reducer style: a frozen :class:`~strategic_defense.state.State`
is advanced by :func:`~strategic_defense.step.step` and never mutated in place.
:class:`~strategic_defense.session.GameSession` drives a round with paced
delays for interactive front ends.
"""

from strategic_defense.actions import (
    Action,
    AdvanceBattle,
    Analyze,
    PlaceTower,
    Reset,
    StartBattle,
)
from strategic_defense.board import new_round, reset
from strategic_defense.components import Position, SearchResult
from strategic_defense.state import State
from strategic_defense.step import step
from strategic_defense.types import CellType, Phase, StrategyLabel

__all__ = [
    "Action",
    "AdvanceBattle",
    "Analyze",
    "CellType",
    "Phase",
    "PlaceTower",
    "Position",
    "Reset",
    "SearchResult",
    "StartBattle",
    "State",
    "StrategyLabel",
    "new_round",
    "reset",
    "step",
]

"""Round actions.

Each action is a small frozen dataclass consumed by
:func:`strategic_defense.step.step`. ``Action`` is the union accepted by the
reducer; dispatch is by type.

Members:
    PlaceTower: Put a tower on an empty cell (setup phase only).
    Analyze: Re-run the attack-path search for the current towers.
    StartBattle: Leave setup and replay the predicted path (needs a tower).
    AdvanceBattle: Move the battle token one cell, finishing at the end.
    Reset: Start a fresh round on the same board.
"""

from dataclasses import dataclass
from typing import Union

from strategic_defense.components import Position


@dataclass(frozen=True)
class PlaceTower:
    position: Position


@dataclass(frozen=True)
class Analyze:
    pass


@dataclass(frozen=True)
class StartBattle:
    pass


@dataclass(frozen=True)
class AdvanceBattle:
    pass


@dataclass(frozen=True)
class Reset:
    pass


Action = Union[PlaceTower, Analyze, StartBattle, AdvanceBattle, Reset]

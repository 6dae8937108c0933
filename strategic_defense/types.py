"""Common type aliases and enumerations.

``CellType`` and ``Phase`` are the two tagged values every system branches on.
``Path`` is the immutable tuple representation shared by the search engine,
the scorer and the battle replay.
"""

from enum import StrEnum, auto
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from strategic_defense.components import Position

Path = Tuple["Position", ...]


class CellType(StrEnum):
    """Board cell classification.

    ``ENEMY`` is display-only: it is never stored in the layout and only shows
    up through :func:`strategic_defense.utils.grid.display_cell` while a battle
    token occupies an empty cell.
    """

    EMPTY = auto()
    START = auto()
    END = auto()
    TOWER = auto()
    ENEMY = auto()


class Phase(StrEnum):
    """Round phase (``setup`` -> ``battle`` -> ``finished``)."""

    SETUP = auto()
    BATTLE = auto()
    FINISHED = auto()


class StrategyLabel(StrEnum):
    """Categorical read of a path's difficulty, shown to the player."""

    HEAVY = auto()
    MODERATE = auto()
    LIGHT = auto()
    CLEAR = auto()

    @property
    def description(self) -> str:
        return _STRATEGY_DESCRIPTIONS[self]


_STRATEGY_DESCRIPTIONS = {
    StrategyLabel.HEAVY: "Heavy resistance expected",
    StrategyLabel.MODERATE: "Moderate defenses detected",
    StrategyLabel.LIGHT: "Light opposition predicted",
    StrategyLabel.CLEAR: "Clear path identified",
}

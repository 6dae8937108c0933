"""Core immutable round ``State`` dataclass.

This module defines the frozen :class:`State` object that represents one round
of the game at a single moment. Systems are pure functions that take a
previous ``State`` plus inputs and return a *new* ``State``; nothing is
mutated in place. A front end keeps exactly one current ``State`` and swaps it
for the value returned by :func:`strategic_defense.step.step`.

Design notes:

* The layout is a sparse persistent map ``cells`` from :class:`Position` to
    :class:`CellType`. Absence of a key means the cell is empty. Only ``start``,
    ``end`` and ``tower`` cells are stored.
* ``towers`` is a persistent set mirroring the ``tower`` cells so influence
    lookups are O(towers) instead of a scan over the board.
* ``enemy`` is the battle token. It is an overlay, never written into
    ``cells``, so replaying a battle cannot disturb the layout.
* ``phase`` gates every mutating action; see :mod:`strategic_defense.step`.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PSet, pmap, pset

from strategic_defense.components import Position, SearchResult
from strategic_defense.types import CellType, Phase


@dataclass(frozen=True)
class State:
    """Immutable round state.

    Attributes:
        rows (int): Board height in cells.
        cols (int): Board width in cells.
        start (Position): Fixed attacker spawn cell.
        end (Position): Fixed attacker goal cell.
        cells (PMap[Position, CellType]): Non-empty layout classifications.
        towers (PSet[Position]): Positions holding a tower.
        phase (Phase): Current round phase.
        analyzing (bool): True between a placement and its analysis result.
        paths_analyzed (int): Frontier expansions performed by the last analysis.
        result (Optional[SearchResult]): Latest analysis, ``None`` before the first one.
        enemy (Optional[Position]): Battle token position.
        battle_step (int): Number of path cells the token has visited.
        message (Optional[str]): Short status line for the player.
    """

    # Board
    rows: int
    cols: int
    start: Position
    end: Position
    cells: PMap[Position, CellType] = pmap()
    towers: PSet[Position] = pset()

    # Round
    phase: Phase = Phase.SETUP
    analyzing: bool = False
    paths_analyzed: int = 0
    result: Optional[SearchResult] = None

    # Battle
    enemy: Optional[Position] = None
    battle_step: int = 0

    message: Optional[str] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of populated fields, handy for debugging and the UI."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            # skip empty persistent collections
            if isinstance(value, (type(pmap()), type(pset()))) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description

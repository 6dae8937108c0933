"""Display values derived from a round state.

:func:`build_report` gathers what a front end shows next to the board: the
counters, the success rate, the strategy label and the predicted path with
threat markers. It holds values only; formatting is left to the caller.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from strategic_defense.components import Position
from strategic_defense.constants import MAX_DIFFICULTY
from strategic_defense.state import State
from strategic_defense.systems.battle import remaining_path
from strategic_defense.systems.difficulty import (
    is_near_tower,
    strategy_label,
    success_rate,
)
from strategic_defense.types import Phase, StrategyLabel


@dataclass(frozen=True)
class PathStep:
    """One predicted cell.

    Attributes:
        index: 1-based step number along the full predicted path.
        position: Cell the attacker moves to.
        near_tower: True if a tower is within threat range.
    """

    index: int
    position: Position
    near_tower: bool


@dataclass(frozen=True)
class AnalysisReport:
    phase: Phase
    towers_placed: int
    paths_analyzed: int
    best_path_length: Optional[int]
    success_rate: int
    difficulty: Optional[int]
    strategy: Optional[StrategyLabel]
    predictions: Tuple[PathStep, ...]
    message: Optional[str]


def annotate_path(
    state: State, path: Tuple[Position, ...], offset: int = 0
) -> Tuple[PathStep, ...]:
    """Attach step numbers and threat markers to ``path``."""
    return tuple(
        PathStep(
            index=offset + i + 1,
            position=pos,
            near_tower=is_near_tower(pos, state.towers),
        )
        for i, pos in enumerate(path)
    )


def build_report(state: State) -> AnalysisReport:
    """Summarize ``state`` for display.

    Before any analysis the success rate reads 100 and there is no path
    length, difficulty or strategy. When the analysis found no route the
    success rate is 0 and the difficulty 100.
    """
    result = state.result
    if result is None:
        return AnalysisReport(
            phase=state.phase,
            towers_placed=len(state.towers),
            paths_analyzed=state.paths_analyzed,
            best_path_length=None,
            success_rate=MAX_DIFFICULTY,
            difficulty=None,
            strategy=None,
            predictions=(),
            message=state.message,
        )

    remaining = remaining_path(state)
    offset = (result.length or 0) - len(remaining)
    return AnalysisReport(
        phase=state.phase,
        towers_placed=len(state.towers),
        paths_analyzed=state.paths_analyzed,
        best_path_length=result.length,
        success_rate=success_rate(result.difficulty) if result.found else 0,
        difficulty=result.difficulty,
        strategy=strategy_label(result.difficulty) if result.found else None,
        predictions=annotate_path(state, remaining, offset),
        message=state.message,
    )

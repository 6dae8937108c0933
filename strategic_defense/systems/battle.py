"""Battle replay systems.

A battle replays the predicted path with a single enemy token, one cell per
:class:`~strategic_defense.actions.AdvanceBattle`. The token is an overlay on
the state; towers, start and end are never reclassified.

Phase transitions:

* ``setup -> battle`` through :func:`start_battle_system` (needs a tower).
* ``battle -> finished`` once the token has visited every path cell, or at
    once when the analysis found no path (a perfect defense).
"""

from dataclasses import replace
from typing import Tuple

from strategic_defense.components import Position
from strategic_defense.state import State
from strategic_defense.systems.analysis import analysis_system
from strategic_defense.types import Phase
from strategic_defense.utils.logger import get_logger

logger = get_logger(__name__)


def can_start_battle(state: State) -> bool:
    """Return True in ``setup`` with at least one tower placed."""
    return state.phase == Phase.SETUP and len(state.towers) > 0


def start_battle_system(state: State) -> State:
    """Enter the battle phase.

    Runs an analysis first if none is stored yet. If the stored result has no
    path the defender has already won and the round finishes immediately.
    """
    if not can_start_battle(state):
        logger.debug(
            "Ignoring battle start in phase %s with %d towers",
            state.phase,
            len(state.towers),
        )
        return state

    if state.result is None or state.analyzing:
        state = analysis_system(state)

    if state.result is None or not state.result.found:
        logger.info("Battle skipped: no route to the goal")
        return replace(
            state,
            phase=Phase.FINISHED,
            message="Victory! Perfect defense achieved",
        )

    logger.info("Battle started along a %d-cell path", len(state.result.path or ()))
    return replace(
        state,
        phase=Phase.BATTLE,
        enemy=None,
        battle_step=0,
        message="AI forces advancing",
    )


def advance_battle_system(state: State) -> State:
    """Move the enemy token one cell, or finish the round at the path's end."""
    if state.phase != Phase.BATTLE or state.result is None or state.result.path is None:
        return state

    path = state.result.path
    if state.battle_step >= len(path):
        logger.info("Battle finished after %d steps", state.battle_step)
        return replace(
            state,
            phase=Phase.FINISHED,
            message="AI victory! The attack reached the goal",
        )

    pos = path[state.battle_step]
    number = state.battle_step + 1
    return replace(
        state,
        enemy=pos,
        battle_step=number,
        message=f"Step {number}/{len(path)}: enemy at ({pos.row}, {pos.col})",
    )


def remaining_path(state: State) -> Tuple[Position, ...]:
    """Predicted cells the token has not reached yet.

    Before a battle this is the whole predicted path; during a battle it is
    the part after the token.
    """
    if state.result is None or state.result.path is None:
        return ()
    if state.phase == Phase.SETUP:
        return state.result.path
    return state.result.path[state.battle_step:]

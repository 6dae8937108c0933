"""Round reducer.

:func:`step` is the single public transition entry point. It dispatches an
:class:`~strategic_defense.actions.Action` to the matching system and returns
a *new* :class:`~strategic_defense.state.State`. Actions that are not valid
in the current phase leave the state unchanged; front ends are expected to
check :func:`~strategic_defense.utils.grid.can_place_tower` and
:func:`~strategic_defense.systems.battle.can_start_battle` beforehand.

Phase gating:

* ``PlaceTower`` / ``Analyze`` / ``StartBattle``: ``setup`` only.
* ``AdvanceBattle``: ``battle`` only.
* ``Reset``: any phase.
"""

from strategic_defense.actions import (
    Action,
    AdvanceBattle,
    Analyze,
    PlaceTower,
    Reset,
    StartBattle,
)
from strategic_defense.board import reset
from strategic_defense.state import State
from strategic_defense.systems.analysis import analysis_system
from strategic_defense.systems.battle import advance_battle_system, start_battle_system
from strategic_defense.systems.placement import place_tower_system


def step(state: State, action: Action) -> State:
    """Apply one action.

    Args:
        state (State): Previous immutable round state.
        action (Action): Action to apply.

    Returns:
        State: Next state. May be the same object if the action was ignored.

    Raises:
        ValueError: If ``action`` is not a recognized action type.
    """
    if isinstance(action, PlaceTower):
        return _step_place_tower(state, action)
    if isinstance(action, Analyze):
        return analysis_system(state)
    if isinstance(action, StartBattle):
        return start_battle_system(state)
    if isinstance(action, AdvanceBattle):
        return advance_battle_system(state)
    if isinstance(action, Reset):
        return reset(state)
    raise ValueError(f"Action is not valid: {action!r}")


def _step_place_tower(state: State, action: PlaceTower) -> State:
    """Place a tower and immediately re-analyze.

    The analysis only runs when the placement was accepted, so an ignored
    placement keeps the previous result and ``paths_analyzed`` untouched.
    """
    placed = place_tower_system(state, action.position)
    if placed is state:
        return state
    return analysis_system(placed)

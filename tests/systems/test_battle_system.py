from dataclasses import replace

from strategic_defense.board import new_round
from strategic_defense.components import Position
from strategic_defense.systems.analysis import analysis_system
from strategic_defense.systems.battle import (
    advance_battle_system,
    can_start_battle,
    remaining_path,
    start_battle_system,
)
from strategic_defense.types import Phase
from tests.test_utils import END_APPROACHES, make_round_with_towers


def test_cannot_start_battle_without_towers() -> None:
    state = new_round()
    assert not can_start_battle(state)
    assert start_battle_system(state) is state


def test_cannot_start_battle_twice() -> None:
    state = start_battle_system(analysis_system(make_round_with_towers([(0, 9)])))
    assert state.phase == Phase.BATTLE
    assert start_battle_system(state) is state


def test_start_battle_runs_pending_analysis() -> None:
    state = make_round_with_towers([(0, 9)])
    assert state.result is None
    started = start_battle_system(state)
    assert started.result is not None and started.result.found
    assert started.phase == Phase.BATTLE
    assert started.enemy is None
    assert started.battle_step == 0


def test_start_battle_with_no_path_finishes_immediately() -> None:
    state = analysis_system(make_round_with_towers(END_APPROACHES))
    finished = start_battle_system(state)
    assert finished.phase == Phase.FINISHED
    assert finished.enemy is None
    assert "Perfect defense" in (finished.message or "")


def test_advance_walks_the_path_then_finishes() -> None:
    state = start_battle_system(analysis_system(make_round_with_towers([(0, 9)])))
    assert state.result is not None and state.result.path is not None
    path = state.result.path

    for index, pos in enumerate(path):
        state = advance_battle_system(state)
        assert state.phase == Phase.BATTLE
        assert state.enemy == pos
        assert state.battle_step == index + 1
        assert remaining_path(state) == path[index + 1 :]

    state = advance_battle_system(state)
    assert state.phase == Phase.FINISHED
    assert advance_battle_system(state) is state


def test_battle_never_alters_layout() -> None:
    start = analysis_system(make_round_with_towers([(0, 9), (6, 2)]))
    state = start_battle_system(start)
    while state.phase == Phase.BATTLE:
        state = advance_battle_system(state)
    assert state.cells == start.cells
    assert state.towers == start.towers


def test_advance_outside_battle_is_ignored() -> None:
    state = analysis_system(make_round_with_towers([(0, 9)]))
    assert advance_battle_system(state) is state


def test_remaining_path_in_setup_is_full_prediction() -> None:
    state = analysis_system(make_round_with_towers([(0, 9)]))
    assert state.result is not None
    assert remaining_path(state) == state.result.path
    assert remaining_path(new_round()) == ()


def test_remaining_path_ignores_stale_token() -> None:
    state = replace(new_round(), enemy=Position(1, 1))
    assert remaining_path(state) == ()

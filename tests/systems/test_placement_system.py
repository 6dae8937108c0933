from dataclasses import replace

from strategic_defense.board import new_round
from strategic_defense.components import Position
from strategic_defense.systems.placement import place_tower_system
from strategic_defense.types import CellType, Phase
from strategic_defense.utils.grid import classify


def test_place_tower_on_empty_cell() -> None:
    state = new_round()
    pos = Position(2, 2)
    new_state = place_tower_system(state, pos)
    assert classify(new_state, pos) == CellType.TOWER
    assert pos in new_state.towers
    assert new_state.analyzing
    # input untouched
    assert classify(state, pos) == CellType.EMPTY
    assert len(state.towers) == 0


def test_tower_set_mirrors_tower_cells() -> None:
    state = new_round()
    for cell in [(0, 0), (1, 4), (7, 9)]:
        state = place_tower_system(state, Position(*cell))
    tower_cells = {pos for pos, kind in state.cells.items() if kind == CellType.TOWER}
    assert tower_cells == set(state.towers)


def test_place_on_occupied_cell_is_ignored() -> None:
    state = place_tower_system(new_round(), Position(2, 2))
    assert place_tower_system(state, Position(2, 2)) is state
    assert place_tower_system(state, state.start) is state
    assert place_tower_system(state, state.end) is state


def test_place_out_of_bounds_is_ignored() -> None:
    state = new_round()
    assert place_tower_system(state, Position(-1, 3)) is state
    assert place_tower_system(state, Position(8, 3)) is state


def test_place_outside_setup_is_ignored() -> None:
    for phase in (Phase.BATTLE, Phase.FINISHED):
        state = replace(new_round(), phase=phase)
        assert place_tower_system(state, Position(0, 0)) is state

from dataclasses import replace
from typing import Optional

import pytest

from strategic_defense.board import new_round, reset
from strategic_defense.components import Position
from strategic_defense.types import CellType, Phase
from strategic_defense.utils.grid import (
    can_place_tower,
    classify,
    display_cell,
    is_in_bounds,
    manhattan_distance,
)
from tests.test_utils import Cell, make_round_with_towers


def test_new_round_layout() -> None:
    state = new_round()
    assert (state.rows, state.cols) == (8, 10)
    assert state.start == Position(3, 0)
    assert state.end == Position(4, 9)
    assert classify(state, state.start) == CellType.START
    assert classify(state, state.end) == CellType.END
    assert classify(state, Position(0, 0)) == CellType.EMPTY
    assert len(state.towers) == 0
    assert state.phase == Phase.SETUP
    assert state.result is None


@pytest.mark.parametrize(
    "rows, cols, start, end",
    [
        (0, 10, None, None),
        (8, 10, (8, 0), None),
        (8, 10, None, (4, 10)),
        (8, 10, (2, 2), (2, 2)),
    ],
)
def test_new_round_rejects_bad_board(
    rows: int, cols: int, start: Optional[Cell], end: Optional[Cell]
) -> None:
    with pytest.raises(ValueError):
        new_round(rows=rows, cols=cols, start=start, end=end)


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (8, 0), (0, 10)])
def test_classify_out_of_bounds_raises(cell: Cell) -> None:
    state = new_round()
    pos = Position(*cell)
    assert not is_in_bounds(state, pos)
    with pytest.raises(IndexError):
        classify(state, pos)


def test_position_value_equality() -> None:
    assert Position(2, 3) == Position(2, 3)
    assert len({Position(2, 3), Position(2, 3)}) == 1


def test_manhattan_distance() -> None:
    assert manhattan_distance(Position(0, 0), Position(3, 4)) == 7
    assert manhattan_distance(Position(3, 4), Position(3, 4)) == 0


def test_can_place_tower_only_on_empty_cells() -> None:
    state = make_round_with_towers([(1, 1)])
    assert can_place_tower(state, Position(0, 0))
    assert not can_place_tower(state, Position(1, 1))
    assert not can_place_tower(state, state.start)
    assert not can_place_tower(state, state.end)
    assert not can_place_tower(state, Position(20, 20))


def test_can_place_tower_only_in_setup() -> None:
    state = replace(new_round(), phase=Phase.BATTLE)
    assert not can_place_tower(state, Position(0, 0))


def test_display_cell_shows_enemy_on_empty_cells_only() -> None:
    state = replace(new_round(), enemy=Position(2, 2))
    assert display_cell(state, Position(2, 2)) == CellType.ENEMY
    assert classify(state, Position(2, 2)) == CellType.EMPTY

    on_start = replace(new_round(), enemy=Position(3, 0))
    assert display_cell(on_start, Position(3, 0)) == CellType.START


def test_reset_clears_towers_and_restamps_endpoints() -> None:
    state = make_round_with_towers([(1, 1), (2, 5)])
    fresh = reset(state)
    assert len(fresh.towers) == 0
    assert classify(fresh, Position(1, 1)) == CellType.EMPTY
    assert classify(fresh, fresh.start) == CellType.START
    assert classify(fresh, fresh.end) == CellType.END


def test_reset_is_idempotent() -> None:
    state = make_round_with_towers([(1, 1), (6, 6)])
    once = reset(state)
    twice = reset(reset(state))
    assert once == twice
    assert once == new_round()


def test_reset_keeps_custom_board() -> None:
    state = new_round(rows=4, cols=5, start=(0, 0), end=(3, 4))
    assert reset(state) == state


def test_description_skips_empty_fields() -> None:
    description = new_round().description
    assert description["phase"] == Phase.SETUP
    assert "cells" in description
    assert "towers" not in description
    assert "result" not in description

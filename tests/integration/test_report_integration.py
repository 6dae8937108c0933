from strategic_defense.actions import AdvanceBattle, PlaceTower, StartBattle
from strategic_defense.board import new_round
from strategic_defense.components import Position
from strategic_defense.report import annotate_path, build_report
from strategic_defense.step import step
from strategic_defense.types import Phase, StrategyLabel
from tests.test_utils import END_APPROACHES, positions


def test_report_before_any_analysis() -> None:
    report = build_report(new_round())
    assert report.phase == Phase.SETUP
    assert report.towers_placed == 0
    assert report.paths_analyzed == 0
    assert report.best_path_length is None
    assert report.success_rate == 100
    assert report.difficulty is None
    assert report.strategy is None
    assert report.predictions == ()


def test_report_with_distant_tower_is_clear_route() -> None:
    state = step(new_round(), PlaceTower(Position(0, 9)))
    report = build_report(state)

    assert report.towers_placed == 1
    assert report.paths_analyzed == state.paths_analyzed > 0
    assert report.best_path_length == 10
    assert report.difficulty == 0
    assert report.success_rate == 100
    assert report.strategy == StrategyLabel.CLEAR
    assert [p.index for p in report.predictions] == list(range(1, 11))
    assert not any(p.near_tower for p in report.predictions)


def test_report_for_perfect_defense() -> None:
    state = new_round()
    for cell in END_APPROACHES:
        state = step(state, PlaceTower(Position(*cell)))
    report = build_report(state)

    assert report.best_path_length is None
    assert report.difficulty == 100
    assert report.success_rate == 0
    assert report.strategy is None
    assert report.predictions == ()


def test_report_predictions_shrink_during_battle() -> None:
    state = step(new_round(), PlaceTower(Position(0, 9)))
    state = step(state, StartBattle())
    for _ in range(3):
        state = step(state, AdvanceBattle())

    report = build_report(state)
    assert report.phase == Phase.BATTLE
    assert len(report.predictions) == 7
    assert report.predictions[0].index == 4
    assert report.best_path_length == 10


def test_annotate_path_marks_threatened_cells() -> None:
    state = step(new_round(), PlaceTower(Position(2, 2)))
    steps = annotate_path(state, tuple(positions([(2, 0), (3, 0), (7, 7)])))
    assert [s.near_tower for s in steps] == [True, False, False]
    assert [s.index for s in steps] == [1, 2, 3]

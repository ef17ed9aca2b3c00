import logging

from battlegrid.game.core.board import BoardState
from battlegrid.game.core.models import (
    CellState,
    Coord,
    Orientation,
    Scenario,
    ShipRequest,
    SkillRequest,
    SkillType,
    cells_for_request,
)
from battlegrid.game.core.scenario import (
    apply_skill,
    default_scenario,
    place_ship,
    run_scenario,
    validate_scenario,
)


def test_default_scenario_runs_cleanly() -> None:
    scenario = default_scenario()
    result = run_scenario(scenario)

    assert result.ok
    assert result.placed == scenario.ships
    assert result.stamped == scenario.skills
    assert result.board.count(CellState.SHIP) == 12
    assert result.board.count(CellState.SKILL_AREA) == 35


def test_default_scenario_keeps_ships_under_skills() -> None:
    result = run_scenario(default_scenario())
    for request in default_scenario().ships:
        for cell in cells_for_request(request):
            assert result.board.cell_at(cell) is CellState.SHIP
    # Cone covers the horizontal ship's row, diamond covers the vertical ship's tail.
    assert result.board.cell_at(Coord(2, 7)) is CellState.SKILL_AREA
    assert result.board.cell_at(Coord(7, 2)) is CellState.SKILL_AREA


def test_every_orientation_and_skill_is_exercised_by_default() -> None:
    scenario = default_scenario()
    assert {ship.orientation for ship in scenario.ships} == set(Orientation)
    assert {skill.skill for skill in scenario.skills} == set(SkillType)


def test_run_scenario_stops_at_first_rejected_ship(caplog) -> None:
    scenario = Scenario(
        name="clash",
        ships=[
            ShipRequest("first", Coord(0, 0), Orientation.HORIZONTAL),
            ShipRequest("clash", Coord(0, 2), Orientation.VERTICAL),
            ShipRequest("never", Coord(5, 5), Orientation.HORIZONTAL),
        ],
        skills=[SkillRequest(SkillType.CROSS, Coord(5, 5))],
    )
    with caplog.at_level(logging.WARNING):
        result = run_scenario(scenario)

    assert not result.ok
    assert result.rejected == scenario.ships[1]
    assert result.placed == [scenario.ships[0]]
    assert result.stamped == []
    assert result.board.count(CellState.SHIP) == 3
    assert result.board.count(CellState.SKILL_AREA) == 0
    assert "ship_rejected name=clash row=0 col=2" in caplog.text


def test_run_scenario_uses_supplied_board() -> None:
    board = BoardState()
    place_ship(board, ShipRequest("existing", Coord(9, 0), Orientation.HORIZONTAL))
    scenario = Scenario(name="extra", ships=[ShipRequest("blocked", Coord(9, 2), Orientation.HORIZONTAL)])

    result = run_scenario(scenario, board=board)

    assert result.board is board
    assert result.rejected == scenario.ships[0]


def test_apply_skill_uses_skill_anchor(board: BoardState) -> None:
    apply_skill(board, SkillRequest(SkillType.CONE, Coord(0, 0)))
    assert board.cell_at(Coord(0, 0)) is CellState.SKILL_AREA
    assert board.cell_at(Coord(1, 1)) is CellState.SKILL_AREA
    assert board.count(CellState.SKILL_AREA) == 12


def test_validate_scenario_reports_reason(valid_scenario: Scenario) -> None:
    assert validate_scenario(valid_scenario) == (True, "")

    valid_scenario.ships.append(ShipRequest("edge", Coord(9, 9), Orientation.DIAGONAL_DOWN))
    valid, reason = validate_scenario(valid_scenario)
    assert not valid
    assert "edge" in reason and "(9, 9)" in reason


def test_validate_scenario_rejects_negative_length() -> None:
    scenario = Scenario(name="bad", ships=[ShipRequest("ghost", Coord(0, 0), Orientation.VERTICAL, length=-1)])
    valid, reason = validate_scenario(scenario)
    assert not valid
    assert "negative" in reason

from __future__ import annotations

import pytest

from battlegrid.game.core.board import BoardState
from battlegrid.game.core.models import Coord, Orientation, Scenario, ShipRequest, SkillRequest, SkillType
from battlegrid.game.scenarios.repository import ScenarioRepository
from battlegrid.game.scenarios.service import ScenarioService


def make_valid_scenario(name: str = "sample") -> Scenario:
    return Scenario(
        name=name,
        ships=[
            ShipRequest("alpha", Coord(0, 0), Orientation.HORIZONTAL),
            ShipRequest("bravo", Coord(4, 4), Orientation.VERTICAL),
            ShipRequest("charlie", Coord(7, 0), Orientation.DIAGONAL_DOWN),
            ShipRequest("delta", Coord(3, 7), Orientation.DIAGONAL_UP),
        ],
        skills=[
            SkillRequest(SkillType.CROSS, Coord(5, 5)),
            SkillRequest(SkillType.CONE, Coord(0, 9)),
        ],
    )


@pytest.fixture
def board() -> BoardState:
    return BoardState()


@pytest.fixture
def valid_scenario() -> Scenario:
    return make_valid_scenario()


@pytest.fixture
def scenario_repository(tmp_path) -> ScenarioRepository:
    return ScenarioRepository(tmp_path / "scenarios")


@pytest.fixture
def scenario_service(scenario_repository: ScenarioRepository) -> ScenarioService:
    return ScenarioService(scenario_repository)


@pytest.fixture
def isolated_app_data(monkeypatch, tmp_path):
    root = tmp_path / "appdata"
    monkeypatch.setenv("BATTLEGRID_APP_DATA_DIR", str(root))
    monkeypatch.delenv("BATTLEGRID_LOG_DIR", raising=False)
    monkeypatch.delenv("BATTLEGRID_SCENARIOS_DIR", raising=False)
    monkeypatch.delenv("BATTLEGRID_RENDER_STYLE", raising=False)
    monkeypatch.delenv("BATTLEGRID_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    return root

"""Scenario validation and execution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from battlegrid.game.core.board import BoardState
from battlegrid.game.core.masks import mask_for
from battlegrid.game.core.models import (
    BOARD_SIZE,
    CellState,
    Coord,
    Orientation,
    Scenario,
    ShipRequest,
    SkillRequest,
    SkillType,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScenarioResult:
    """Outcome of running a scenario against a board."""

    board: BoardState
    placed: list[ShipRequest] = field(default_factory=list)
    stamped: list[SkillRequest] = field(default_factory=list)
    rejected: ShipRequest | None = None

    @property
    def ok(self) -> bool:
        return self.rejected is None


def default_scenario() -> Scenario:
    """Built-in scenario covering every orientation and skill type."""
    return Scenario(
        name="default",
        ships=[
            ShipRequest("horizontal", Coord(2, 4), Orientation.HORIZONTAL),
            ShipRequest("vertical", Coord(5, 1), Orientation.VERTICAL),
            ShipRequest("diagonal-down", Coord(0, 0), Orientation.DIAGONAL_DOWN),
            ShipRequest("diagonal-up", Coord(9, 7), Orientation.DIAGONAL_UP),
        ],
        skills=[
            SkillRequest(SkillType.CONE, Coord(0, 6)),
            SkillRequest(SkillType.CROSS, Coord(6, 6)),
            SkillRequest(SkillType.DIAMOND, Coord(7, 3)),
        ],
    )


def place_ship(board: BoardState, request: ShipRequest) -> bool:
    """Place a ship request on the board."""
    values = (CellState.SHIP,) * request.length
    return board.place(request.bow, values, request.orientation)


def apply_skill(board: BoardState, request: SkillRequest) -> None:
    """Stamp a skill request's mask on the board."""
    board.stamp(request.origin, mask_for(request.skill), request.skill.anchor)


def validate_scenario(scenario: Scenario, size: int = BOARD_SIZE) -> tuple[bool, str]:
    """Validate that every ship of a scenario can be placed in order."""
    board = BoardState(size=size)
    for request in scenario.ships:
        if request.length < 0:
            return False, f"Ship '{request.name}' has negative length."
        if not place_ship(board, request):
            return False, (
                f"Ship '{request.name}' cannot be placed at "
                f"({request.bow.row}, {request.bow.col})."
            )
    return True, ""


def run_scenario(scenario: Scenario, board: BoardState | None = None) -> ScenarioResult:
    """Place all ships then stamp all skills, stopping at the first rejected ship."""
    result = ScenarioResult(board=board if board is not None else BoardState())
    for request in scenario.ships:
        if not place_ship(result.board, request):
            logger.warning(
                "ship_rejected name=%s row=%d col=%d orientation=%s",
                request.name,
                request.bow.row,
                request.bow.col,
                request.orientation.value,
                extra={"scenario": scenario.name, "ship": request.name},
            )
            result.rejected = request
            return result
        logger.debug(
            "ship_placed name=%s row=%d col=%d orientation=%s",
            request.name,
            request.bow.row,
            request.bow.col,
            request.orientation.value,
        )
        result.placed.append(request)

    for skill in scenario.skills:
        apply_skill(result.board, skill)
        logger.debug(
            "skill_stamped type=%s row=%d col=%d",
            skill.skill.value,
            skill.origin.row,
            skill.origin.col,
        )
        result.stamped.append(skill)

    logger.info(
        "scenario_complete name=%s ships=%d skills=%d",
        scenario.name,
        len(result.placed),
        len(result.stamped),
    )
    return result

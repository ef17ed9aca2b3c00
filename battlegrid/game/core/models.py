"""Core domain models used by the placement engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

BOARD_SIZE = 10
SHIP_SIZE = 3
MASK_SIZE = 5


class CellState(IntEnum):
    """Cell values stored on the board."""

    EMPTY = 0
    SHIP = 3
    SKILL_AREA = 5


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL_DOWN = "DIAGONAL_DOWN"
    DIAGONAL_UP = "DIAGONAL_UP"

    @property
    def delta(self) -> tuple[int, int]:
        """Per-step (row, col) offset along this orientation."""
        return ORIENTATION_DELTAS[self]


ORIENTATION_DELTAS: dict[Orientation, tuple[int, int]] = {
    Orientation.HORIZONTAL: (0, 1),
    Orientation.VERTICAL: (1, 0),
    Orientation.DIAGONAL_DOWN: (1, 1),
    Orientation.DIAGONAL_UP: (-1, 1),
}


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


class SkillType(StrEnum):
    """Area-of-effect skill patterns."""

    CONE = "CONE"
    CROSS = "CROSS"
    DIAMOND = "DIAMOND"

    @property
    def anchor(self) -> Coord:
        """Mask cell aligned with the stamp origin."""
        return SKILL_ANCHORS[self]


# Cone is anchored at its apex, the others at the mask center.
SKILL_ANCHORS: dict[SkillType, Coord] = {
    SkillType.CONE: Coord(0, MASK_SIZE // 2),
    SkillType.CROSS: Coord(MASK_SIZE // 2, MASK_SIZE // 2),
    SkillType.DIAMOND: Coord(MASK_SIZE // 2, MASK_SIZE // 2),
}


@dataclass(frozen=True, slots=True)
class ShipRequest:
    """Requested placement of a single straight-line ship."""

    name: str
    bow: Coord
    orientation: Orientation
    length: int = SHIP_SIZE


@dataclass(frozen=True, slots=True)
class SkillRequest:
    """Requested application of a skill mask."""

    skill: SkillType
    origin: Coord


@dataclass(slots=True)
class Scenario:
    """Ordered ship and skill requests for one run."""

    name: str
    ships: list[ShipRequest] = field(default_factory=list)
    skills: list[SkillRequest] = field(default_factory=list)


def cells_along(bow: Coord, length: int, orientation: Orientation) -> list[Coord]:
    """Compute the cells covered by a line starting at ``bow``."""
    d_row, d_col = orientation.delta
    return [Coord(bow.row + i * d_row, bow.col + i * d_col) for i in range(length)]


def cells_for_request(request: ShipRequest) -> list[Coord]:
    """Compute occupied cells for a ship request."""
    return cells_along(request.bow, request.length, request.orientation)

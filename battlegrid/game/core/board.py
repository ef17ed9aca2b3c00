"""Board state representation and mutation helpers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from battlegrid.game.core.models import (
    BOARD_SIZE,
    CellState,
    Coord,
    Orientation,
    cells_along,
)


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board state."""

    size: int = BOARD_SIZE
    cells: np.ndarray = field(
        default_factory=lambda: np.full((BOARD_SIZE, BOARD_SIZE), CellState.EMPTY, dtype=np.int8)
    )

    def __post_init__(self) -> None:
        if self.cells.shape != (self.size, self.size):
            self.cells = np.full((self.size, self.size), CellState.EMPTY, dtype=np.int8)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def cell_at(self, coord: Coord) -> CellState:
        """Return the state of an in-bounds cell."""
        return CellState(int(self.cells[coord.row, coord.col]))

    def can_place(self, bow: Coord, length: int, orientation: Orientation) -> bool:
        """Return whether a line fits in bounds without touching occupied cells."""
        for cell in cells_along(bow, length, orientation):
            if not self.in_bounds(cell):
                return False
            if self.cells[cell.row, cell.col] != CellState.EMPTY:
                return False
        return True

    def place(self, bow: Coord, values: Sequence[CellState], orientation: Orientation) -> bool:
        """Write ``values`` along a line, or leave the board untouched and return False.

        Every value must be a ``CellState``; an unknown code raises ``ValueError``
        before any cell is written.
        """
        if not self.can_place(bow, len(values), orientation):
            return False
        states = tuple(CellState(value) for value in values)
        for cell, state in zip(cells_along(bow, len(states), orientation), states):
            self.cells[cell.row, cell.col] = state
        return True

    def stamp(self, origin: Coord, mask: np.ndarray, anchor: Coord) -> None:
        """Mark empty cells covered by ``mask`` as skill area.

        The mask cell at ``anchor`` lands on ``origin``. Targets outside the
        board are clipped and non-empty cells are never overwritten.
        """
        for mask_row, mask_col in np.argwhere(mask):
            target = Coord(
                origin.row + int(mask_row) - anchor.row,
                origin.col + int(mask_col) - anchor.col,
            )
            if not self.in_bounds(target):
                continue
            if self.cells[target.row, target.col] == CellState.EMPTY:
                self.cells[target.row, target.col] = CellState.SKILL_AREA

    def count(self, state: CellState) -> int:
        """Return how many cells hold ``state``."""
        return int(np.count_nonzero(self.cells == state))

    def snapshot(self) -> np.ndarray:
        """Return a detached copy of the cell grid."""
        return self.cells.copy()

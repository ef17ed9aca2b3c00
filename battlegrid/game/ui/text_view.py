"""Text rendering of the final board."""

from __future__ import annotations

from collections.abc import Callable

from battlegrid.game.core.board import BoardState
from battlegrid.game.core.models import CellState

RENDER_STYLES: tuple[str, ...] = ("numeric", "glyph")

GLYPHS: dict[CellState, str] = {
    CellState.EMPTY: "~",
    CellState.SHIP: "#",
    CellState.SKILL_AREA: "*",
}

CELL_LABELS: dict[CellState, str] = {
    CellState.EMPTY: "water",
    CellState.SHIP: "ship",
    CellState.SKILL_AREA: "skill area",
}


def render_legend(style: str = "numeric") -> str:
    """Return the legend line matching a render style."""
    symbol = _symbol_for(style)
    parts = [f"{symbol(state)} = {CELL_LABELS[state]}" for state in CellState]
    return "Board (" + ", ".join(parts) + ")"


def render_board(board: BoardState, style: str = "numeric") -> str:
    """Render the board as a header row followed by one line per board row."""
    symbol = _symbol_for(style)
    lines = ["  " + "".join(f"{col:2d}" for col in range(board.size))]
    for row in range(board.size):
        cells = "".join(f"{symbol(CellState(int(value))):>2}" for value in board.cells[row])
        lines.append(f"{row:2d}{cells}")
    return "\n".join(lines)


def _symbol_for(style: str) -> Callable[[CellState], str]:
    if style == "numeric":
        return lambda state: str(int(state))
    if style == "glyph":
        return lambda state: GLYPHS[state]
    raise ValueError(f"Unknown render style: {style!r}.")

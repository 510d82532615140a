"""
ASCII rendering for symgrid grids.

Draws a grid as a bordered block, one line per row, for debugging and
demos. Jagged rows stop where their data stops; the box is sized to the
longest row.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Mode, Point
from symgrid import BaseGrid

logger = logging.getLogger(__name__)

__all__ = ["render"]

MODE_COLORS: dict[Mode, Callable[[str], str]] = {
    Mode.RECTANGULAR: chalk.cyan,
    Mode.JAGGED: chalk.yellow,
}


def _plain(s: str) -> str:
    return s


def render(
    grid: BaseGrid,
    cell_width: int | None = None,
    highlight: Point | None = None,
    color: bool = True,
) -> str:
    """
    Render a grid as a box of text.

    Args:
        grid: Rectangular or jagged grid to draw
        cell_width: Characters per cell (default and minimum: widest value + 2)
        highlight: Optional (row, column) to draw inverted
        color: Colorize with simple_chalk; False gives plain text

    Returns:
        Rendered string, lines joined by newlines
    """
    border = MODE_COLORS[grid.mode] if color else _plain
    value_color = chalk.green if color else _plain
    default = grid.default_factory()

    texts = [[str(v) for v in row.values()] for row in grid]
    # Never narrower than the widest value plus the plain-text highlight brackets
    widest = max((len(t) for row in texts for t in row), default=1)
    cell_width = widest + 2 if cell_width is None else max(cell_width, widest + 2)
    logger.debug("render: %s grid %s, cell_width=%d", grid.mode.value, grid.row_lengths(), cell_width)

    max_cols = max((len(row) for row in texts), default=0)
    title = f" {grid.mode.value} {len(texts)}x{max_cols} "
    inner_width = max(max_cols * cell_width, len(title) + 2)

    # Top border with centered title
    title_start = (inner_width - len(title)) // 2
    lines = [
        border(
            "┌" + "─" * title_start + title + "─" * (inner_width - title_start - len(title)) + "┐"
        )
    ]

    for r_idx, row in enumerate(texts):
        parts = [border("│")]
        for c_idx, text in enumerate(row):
            content = text.center(cell_width)
            if highlight == (r_idx, c_idx):
                content = chalk.bgWhite.black(content) if color else f"[{text}]".center(cell_width)
            elif grid[r_idx][c_idx].value != default:
                content = value_color(content)
            parts.append(content)
        # Pad short rows so the right border lines up
        parts.append(" " * (inner_width - len(row) * cell_width))
        parts.append(border("│"))
        lines.append("".join(parts))

    lines.append(border("└" + "─" * inner_width + "┘"))
    return "\n".join(lines)

"""
ASCII rendering for fractal grids.

Each row becomes one line of DRAWN_CHAR / BLANK_CHAR characters and every
grid block ends with a blank line.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from fractal import make_grid
from fractal_types import CellState, Grid, Request

logger = logging.getLogger(__name__)

DRAWN_CHAR = "#"
BLANK_CHAR = " "

_GLYPHS: dict[CellState, str] = {
    CellState.DRAWN: DRAWN_CHAR,
    CellState.BLANK: BLANK_CHAR,
}


def render_rows(grid: Grid) -> list[str]:
    """Render each grid row as a string, top to bottom."""
    return ["".join(_GLYPHS[cell] for cell in row) for row in grid.cells]


def render(grid: Grid) -> str:
    """
    Render a grid as a text block.

    Returns:
        Every row followed by a newline, then one extra newline
    """
    return "".join(line + "\n" for line in render_rows(grid)) + "\n"


def render_requests(requests: Iterable[Request]) -> Iterator[str]:
    """
    Build and render requests, last listed request first.

    Each grid is built, rendered and released before the next request starts.
    """
    ordered = list(requests)
    logger.info("render_requests: %d request(s)", len(ordered))
    for request in reversed(ordered):
        grid = make_grid(request.kind, request.depth)
        logger.info(
            "render_requests: kind=%s depth=%d side=%d",
            request.kind.name,
            request.depth,
            grid.side,
        )
        yield render(grid)

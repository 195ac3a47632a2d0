"""
Self-similar fractal grids built by recursive coordinate scaling.

A pattern's stencil lists the active sub-tiles of its base tile. At depth d the
grid has side base_size**d; each stencil offset is scaled by the sub-tile edge
at every level, so only the final drawn cells are ever written.
"""

from __future__ import annotations

import logging

from fractal_types import (
    MAX_DEPTH,
    MIN_DEPTH,
    CellState,
    Grid,
    InvalidDepth,
    PatternDefinition,
    PatternKind,
)
from pattern_catalog import lookup

__all__ = ["build", "expected_drawn_count", "make_grid", "sub_grid"]

logger = logging.getLogger(__name__)


def _check_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise InvalidDepth(f"Depth must be an integer, got {type(depth).__name__}: {depth!r}")
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise InvalidDepth(
            f"Depth out of range: {depth}\n"
            f"  Valid depths: {MIN_DEPTH} to {MAX_DEPTH}"
        )


# =============================================================================
# Grid Builder
# =============================================================================


def build(definition: PatternDefinition, depth: int) -> Grid:
    """
    Build the grid of a pattern at the given depth.

    The grid starts fully blank. fill() descends one level per call, moving the
    origin by stencil offset * sub-tile edge, and marks a single cell once no
    levels remain. Sub-tiles at each level are disjoint, so no cell is written
    twice.

    Args:
        definition: The pattern to build
        depth: Recursion depth, MIN_DEPTH to MAX_DEPTH

    Returns:
        Grid of side definition.base_size ** depth

    Raises:
        InvalidDepth: If depth is not an integer in range
    """
    _check_depth(depth)

    base = definition.base_size
    side = definition.side(depth)
    buffer: list[list[CellState]] = [[CellState.BLANK] * side for _ in range(side)]

    def fill(row: int, col: int, remaining: int) -> None:
        if remaining == 0:
            buffer[row][col] = CellState.DRAWN
            return
        edge = base ** (remaining - 1)
        for dr, dc in definition.stencil:
            fill(row + dr * edge, col + dc * edge, remaining - 1)

    fill(0, 0, depth)

    grid = Grid(tuple(tuple(row) for row in buffer))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "build: pattern=%s depth=%d side=%d drawn=%d",
            definition.name,
            depth,
            side,
            grid.drawn_count(),
        )
    return grid


def make_grid(kind: PatternKind | int, depth: int) -> Grid:
    """Look up a pattern by kind and build it at the given depth."""
    return build(lookup(kind), depth)


# =============================================================================
# Inspection
# =============================================================================


def expected_drawn_count(definition: PatternDefinition, depth: int) -> int:
    """Number of drawn cells in build(definition, depth)."""
    return len(definition.stencil) ** depth


def sub_grid(grid: Grid, row: int, col: int, side: int) -> Grid:
    """
    Copy the square window of the given side whose top-left corner is (row, col).

    Raises:
        ValueError: If the window does not fit inside the grid
    """
    if side < 1 or row < 0 or col < 0 or row + side > grid.rows or col + side > grid.cols:
        raise ValueError(
            f"Window ({row}, {col}) of side {side} does not fit in a "
            f"{grid.rows}x{grid.cols} grid"
        )
    return Grid(tuple(r[col:col + side] for r in grid.cells[row:row + side]))

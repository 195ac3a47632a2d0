"""
Shared type definitions for the fractal drawer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MIN_DEPTH = 1
MAX_DEPTH = 6


class CellState(Enum):
    """Rendered state of a single grid cell."""

    DRAWN = "drawn"
    BLANK = "blank"


class PatternKind(Enum):
    """Fractal kinds, valued by their request-file identifier."""

    CARPET = 1  # Sierpinski carpet
    TRIANGLE = 2  # Sierpinski triangle
    VICSEK = 3  # Vicsek fractal


# =============================================================================
# Errors
# =============================================================================


class FractalError(ValueError):
    """Base class for every error raised by the fractal drawer."""


class InvalidKind(FractalError):
    """Requested pattern kind is outside the known set."""


class InvalidDepth(FractalError):
    """Requested depth is not an integer in [MIN_DEPTH, MAX_DEPTH]."""


class InputError(FractalError):
    """A request file or one of its lines was rejected."""


# =============================================================================
# Pattern and Grid Types
# =============================================================================


Offset = tuple[int, int]


@dataclass(frozen=True)
class PatternDefinition:
    """A self-similar stencil: the active sub-tiles of a base_size x base_size tile."""

    name: str
    base_size: int
    stencil: tuple[Offset, ...]

    def __post_init__(self) -> None:
        if self.base_size < 2:
            raise ValueError(f"base_size must be >= 2, got {self.base_size} for '{self.name}'")
        outside = [
            (r, c) for r, c in self.stencil
            if not (0 <= r < self.base_size and 0 <= c < self.base_size)
        ]
        if outside:
            raise ValueError(
                f"Stencil offsets outside the {self.base_size}x{self.base_size} tile "
                f"in pattern '{self.name}': {outside}"
            )
        if len(set(self.stencil)) != len(self.stencil):
            raise ValueError(f"Duplicate stencil offsets in pattern '{self.name}'")

    def side(self, depth: int) -> int:
        """Edge length of the grid this pattern produces at the given depth."""
        return self.base_size**depth


@dataclass(frozen=True)
class Grid:
    """A square, row-major grid of cell states."""

    cells: tuple[tuple[CellState, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def side(self) -> int:
        return self.rows

    def cell(self, row: int, col: int) -> CellState:
        return self.cells[row][col]

    def drawn_count(self) -> int:
        return sum(row.count(CellState.DRAWN) for row in self.cells)


@dataclass(frozen=True)
class Request:
    """One validated (kind, depth) pair read from a request file."""

    kind: PatternKind
    depth: int

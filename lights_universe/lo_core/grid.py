"""
Grid model: per-cell lit state for a fixed width×height rectangle.

Lit state is stored as a numpy boolean array indexed [x, y]. Dimensions are
fixed at construction.
"""

from typing import Iterator

import numpy as np

from .codec import to_index
from .errors import InvalidConfiguration
from .types import Cell, Coord


class Grid:
    """
    Rectangular grid of lit/unlit cells.

    Coordinates follow (x, y) with 0 <= x < width and 0 <= y < height.
    Bounds are not checked by cell accessors; callers guarantee them.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise InvalidConfiguration(
                f"Grid dimensions must be >= 1, got {width}×{height}"
            )
        self._width = width
        self._height = height
        self._lit = np.zeros((width, height), dtype=bool)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def total_cells(self) -> int:
        return self._width * self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_lit(self, x: int, y: int) -> bool:
        return bool(self._lit[x, y])

    def toggle(self, x: int, y: int) -> bool:
        """Flip the cell at (x, y) and return its new lit state."""
        self._lit[x, y] = not self._lit[x, y]
        return bool(self._lit[x, y])

    def cell(self, x: int, y: int) -> Cell:
        return Cell(x, y, self.is_lit(x, y))

    def cells(self) -> Iterator[Cell]:
        """Iterate all cells column by column (bit index order)."""
        for x in range(self._width):
            for y in range(self._height):
                yield Cell(x, y, bool(self._lit[x, y]))

    def lit_cells(self) -> list[Coord]:
        """Coordinates of lit cells, sorted by bit index."""
        return [(int(x), int(y)) for x, y in np.argwhere(self._lit)]

    def lit_count(self) -> int:
        return int(self._lit.sum())

    def all_dark(self) -> bool:
        """
        O(width·height) scan for an all-off board.

        Diagnostics only. Win detection reads the solution accumulator.
        """
        return not self._lit.any()

    def clear(self) -> None:
        """Turn every cell off."""
        self._lit[:, :] = False

    def copy(self) -> "Grid":
        """Independent grid with the same dimensions and lit state."""
        other = Grid(self._width, self._height)
        other._lit = self._lit.copy()
        return other

    def to_array(self) -> np.ndarray:
        """Copy of the lit state, shape (width, height)."""
        return self._lit.copy()

    def to_rows(self) -> list[list[int]]:
        """
        Lit state as rows of 0/1 (row y, column x).

        JSON-serializable; used for hashing and receipts.
        """
        return self._lit.T.astype(int).tolist()

    def index_of(self, x: int, y: int) -> int:
        return to_index(x, y, self._height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and bool(np.array_equal(self._lit, other._lit))
        )

    def __repr__(self) -> str:
        return f"Grid({self._width}×{self._height}, lit={self.lit_count()})"

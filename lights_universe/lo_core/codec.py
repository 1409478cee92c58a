"""
Coordinate codec: (x, y) <-> 1-based bit index.

Cells are numbered column by column:

    index(x, y) = x * height + y + 1

Index 0 is never produced or consumed, so bit 0 of a solution mask is
always zero. The inverse uses integer divmod only.
"""

from typing import Iterator

from .types import BitIndex


def to_index(x: int, y: int, height: int) -> BitIndex:
    """
    Map coordinates to their 1-based bit index.

    Args:
        x: Column, 0 <= x < width
        y: Row, 0 <= y < height
        height: Grid height

    Returns:
        x * height + y + 1

    Examples:
        >>> to_index(0, 0, 5)
        1
        >>> to_index(2, 2, 5)
        13
    """
    return BitIndex(x * height + y + 1)


def from_index(index: int, height: int) -> tuple[int, int]:
    """
    Map a 1-based bit index back to (x, y).

    Args:
        index: 1 <= index <= width * height
        height: Grid height

    Returns:
        (x, y) such that to_index(x, y, height) == index

    Examples:
        >>> from_index(13, 5)
        (2, 2)
        >>> from_index(25, 5)
        (4, 4)
    """
    x, y = divmod(index - 1, height)
    return x, y


def index_bit(x: int, y: int, height: int) -> int:
    """Single-bit mask for the cell at (x, y)."""
    return 1 << to_index(x, y, height)


def iter_set_indices(mask: int, total_cells: int) -> Iterator[BitIndex]:
    """
    Yield bit indices 1..total_cells that are set in mask, ascending.

    Bit 0 is ignored.
    """
    for index in range(1, total_cells + 1):
        if mask >> index & 1:
            yield BitIndex(index)

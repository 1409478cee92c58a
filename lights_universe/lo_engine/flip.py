"""
Flip engine: cross-toggle plus solution accumulator update.

A flip at origin (x, y) toggles the origin and its in-bounds orthogonal
neighbours, then XORs the origin's bit into the accumulator. Only the
origin's bit is recorded; neighbours never touch the accumulator.

Algebra:
- Involution: flipping the same origin twice restores grid and accumulator
- Commutativity: any order of the same origin multiset gives the same result

Both follow from each flip being a fixed XOR pattern over cells and bits.
"""

from typing import Optional

from lo_core.codec import index_bit
from lo_core.grid import Grid
from lo_core.types import Cell, CellCallback, Coord, SolutionMask


def cross_cells(width: int, height: int, x: int, y: int) -> list[Coord]:
    """
    In-bounds cells of the cross centred on (x, y).

    Order: horizontal row (x-1, x, x+1) then vertical (y-1, y+1).
    Out-of-bounds neighbours are skipped silently.
    """
    cells = []
    for dx in (-1, 0, 1):
        xx = x + dx
        if 0 <= xx < width:
            cells.append((xx, y))
    for dy in (-1, 1):
        yy = y + dy
        if 0 <= yy < height:
            cells.append((x, yy))
    return cells


def flip_origin_and_neighbors(
    grid: Grid,
    solution: int,
    x: int,
    y: int,
    on_cell_state_changed: Optional[CellCallback] = None,
) -> tuple[SolutionMask, list[Cell]]:
    """
    Apply the cross-toggle at (x, y) and record the origin click.

    Args:
        grid: Grid to mutate in place
        solution: Current accumulator
        x, y: Origin, must be in bounds (not checked here)
        on_cell_state_changed: Called once per toggled cell with (x, y, lit)

    Returns:
        (new_solution, touched) where touched lists each toggled cell with
        its new lit state, in toggle order
    """
    touched = []
    for cx, cy in cross_cells(grid.width, grid.height, x, y):
        lit = grid.toggle(cx, cy)
        touched.append(Cell(cx, cy, lit))
        if on_cell_state_changed is not None:
            on_cell_state_changed(cx, cy, lit)

    return SolutionMask(solution ^ index_bit(x, y, grid.height)), touched

"""
Puzzle generator: random, guaranteed-solvable starting boards.

A board is seeded by clicking k distinct origin cells, with k drawn
uniformly from [min_steps, max_steps]. Replaying the same origins (in any
order) turns every light off, so every generated board is solvable.

Origins are chosen in a single pass over bit indices 1..n (selection
sampling): at step i the current index is taken with probability

    p = remaining / (n + 1 - i)

which selects exactly k of n indices, each subset equally likely. The scan
starts at a random rotation offset. The offset does not change the selection
distribution; it only decorrelates the physical cells from the raw draw
sequence. The loop exits as soon as the quota is met.
"""

import logging
from typing import Optional

from lo_core.codec import from_index
from lo_core.grid import Grid
from lo_core.rng import RandomSource
from lo_core.types import CellCallback, GenerationResult, SolutionMask

from .flip import flip_origin_and_neighbors

logger = logging.getLogger(__name__)


def rotated_index(i: int, offset: int, total_cells: int) -> int:
    """Bit index visited at scan step i (1-based) for a rotation offset."""
    return ((i + offset - 1) % total_cells) + 1


def seed_puzzle(
    grid: Grid,
    rng: RandomSource,
    min_steps: int,
    max_steps: int,
    solution: int = 0,
    on_cell_state_changed: Optional[CellCallback] = None,
) -> GenerationResult:
    """
    Click a random set of distinct origins on the grid.

    Args:
        grid: Grid to seed (normally all dark)
        rng: Source of next_int / next_float01 draws
        min_steps, max_steps: Inclusive range for the number of origins.
            1 <= min_steps <= max_steps <= grid.total_cells, validated by
            the caller.
        solution: Starting accumulator (normally 0)
        on_cell_state_changed: Forwarded to every flip

    Returns:
        GenerationResult with the accumulator, the origins in selection
        order and the drawn origin count

    Draw order:
        1. next_int(min_steps, max_steps) -> origin count
        2. next_int(0, total_cells - 1)   -> rotation offset
        3. next_float01() once per scanned index until the count is met
    """
    total_cells = grid.total_cells
    requested = rng.next_int(min_steps, max_steps)
    bits_to_flip = requested
    offset = rng.next_int(0, total_cells - 1)

    origins = []
    for i in range(1, total_cells + 1):
        if bits_to_flip == 0:
            break
        probability = bits_to_flip / (total_cells + 1 - i)
        roll = rng.next_float01()
        if roll <= probability:
            x, y = from_index(rotated_index(i, offset, total_cells), grid.height)
            solution, _ = flip_origin_and_neighbors(
                grid, solution, x, y, on_cell_state_changed
            )
            origins.append((x, y))
            bits_to_flip -= 1

    logger.debug(
        "Seeded %d origins (offset=%d): %s", len(origins), offset, origins
    )

    return GenerationResult(
        solution=SolutionMask(solution),
        origins=tuple(origins),
        requested_steps=requested,
    )

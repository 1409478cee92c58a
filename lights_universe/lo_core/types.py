"""
Core type definitions for the Lights-Out engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, NewType

# Coordinates (x, y): x is the column, y is the row
Coord = tuple[int, int]

# 1-based bit index of a cell (0 is never used)
BitIndex = NewType("BitIndex", int)

# Solution accumulator: one bit per origin cell
SolutionMask = NewType("SolutionMask", int)

# Hash type (64-bit from SHA-256)
Hash64 = NewType("Hash64", int)

# Render callback: (x, y, lit)
CellCallback = Callable[[int, int, bool], None]

# Won sink
WonCallback = Callable[[], None]


@dataclass(frozen=True, order=True)
class Cell:
    """Lit state of a single cell at (x, y)."""
    x: int
    y: int
    lit: bool

    def __iter__(self):
        """Allow tuple unpacking: x, y, lit = cell"""
        return iter((self.x, self.y, self.lit))


class PuzzleState(Enum):
    """Two-state machine: PLAYING -> WON, back to PLAYING only on reset."""
    PLAYING = "playing"
    WON = "won"


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single player move.

    - updated_cells: cells toggled by the move with their new lit state
      (empty when the move was ignored because the puzzle is already won)
    - move_count: move count after the move
    - state: puzzle state after the win check
    """
    updated_cells: tuple[Cell, ...]
    move_count: int
    state: PuzzleState


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of seeding a puzzle.

    - solution: accumulator after all seed flips
    - origins: origin coordinates in selection order (all distinct)
    - requested_steps: number of origins drawn from [min_steps, max_steps]
    """
    solution: SolutionMask
    origins: tuple[Coord, ...]
    requested_steps: int

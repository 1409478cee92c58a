"""
lo_core: Core primitives for the Lights-Out puzzle engine.

Provides:
- types: Cell, PuzzleState and other fundamental types
- errors: PuzzleError hierarchy
- codec: (x, y) <-> 1-based bit index mapping
- grid: Grid model holding per-cell lit state
- rng: Injectable random sources (numpy-backed and scripted)
- order_hash: Deterministic hashing of board state
"""

from .codec import from_index, index_bit, iter_set_indices, to_index
from .errors import (
    InvalidConfiguration,
    InvalidCoordinate,
    PuzzleError,
    RandomSourceExhausted,
)
from .grid import Grid
from .types import Cell, PuzzleState

__all__ = [
    "Cell",
    "Grid",
    "InvalidConfiguration",
    "InvalidCoordinate",
    "PuzzleError",
    "PuzzleState",
    "RandomSourceExhausted",
    "from_index",
    "index_bit",
    "iter_set_indices",
    "to_index",
]

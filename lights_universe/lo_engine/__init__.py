"""
lo_engine: Lights-Out game logic on top of lo_core.

Modules:
- config.py: PuzzleConfig and its validation
- flip.py: Cross-toggle and solution accumulator update
- generator.py: Random solvable puzzle seeding
- win.py: Accumulator-based win detection state machine
- engine.py: PuzzleEngine, new_puzzle
"""

from .config import PuzzleConfig
from .engine import PuzzleEngine, PuzzleSnapshot, new_puzzle
from .flip import cross_cells, flip_origin_and_neighbors
from .generator import seed_puzzle
from .win import WinDetector, is_solved

__all__ = [
    "PuzzleConfig",
    "PuzzleEngine",
    "PuzzleSnapshot",
    "WinDetector",
    "cross_cells",
    "flip_origin_and_neighbors",
    "is_solved",
    "new_puzzle",
    "seed_puzzle",
]

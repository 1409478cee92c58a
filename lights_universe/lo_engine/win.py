"""
Win detection.

The puzzle is solved exactly when the solution accumulator is zero. This is
an O(1) test that never inspects cell lit states.
"""

import logging
from typing import Optional

from lo_core.types import PuzzleState, WonCallback

logger = logging.getLogger(__name__)


def is_solved(solution: int) -> bool:
    return solution == 0


class WinDetector:
    """
    PLAYING -> WON state machine.

    - Starts in PLAYING
    - observe() moves to WON the first time the accumulator is 0
    - WON is terminal until reset()
    - on_won fires once per PLAYING -> WON transition
    """

    def __init__(self, on_won: Optional[WonCallback] = None) -> None:
        self._on_won = on_won
        self._state = PuzzleState.PLAYING

    @property
    def state(self) -> PuzzleState:
        return self._state

    def observe(self, solution: int) -> PuzzleState:
        if self._state is PuzzleState.PLAYING and is_solved(solution):
            self._state = PuzzleState.WON
            logger.debug("Puzzle solved")
            if self._on_won is not None:
                self._on_won()
        return self._state

    def reset(self) -> None:
        self._state = PuzzleState.PLAYING

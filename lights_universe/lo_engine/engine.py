"""
Puzzle engine: explicit, caller-owned game state.

One PuzzleEngine holds the grid, the solution accumulator, the move count
and the win state machine. All mutation goes through its methods:

- new_puzzle(...): validate configuration, build and seed an engine
- PuzzleEngine.apply_move(x, y): flip -> count -> win check
- PuzzleEngine.reset(): clear and re-seed with the same configuration

Every call runs to completion synchronously before the next one.
"""

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Optional

from lo_core.codec import from_index, iter_set_indices
from lo_core.errors import InvalidCoordinate
from lo_core.grid import Grid
from lo_core.rng import RandomSource
from lo_core.types import (
    CellCallback,
    Coord,
    MoveResult,
    PuzzleState,
    SolutionMask,
    WonCallback,
)

from .config import PuzzleConfig
from .flip import flip_origin_and_neighbors
from .generator import seed_puzzle
from .win import WinDetector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleSnapshot:
    """
    Point-in-time copy of engine state.

    - grid: independent copy of the grid
    - solution: accumulator (0 means solved)
    - move_count: player moves since the last reset
    - state: PLAYING or WON
    """
    grid: Grid
    solution: SolutionMask
    move_count: int
    state: PuzzleState


class PuzzleEngine:
    """
    A single Lights-Out game.

    Args:
        config: Board dimensions and seed step range (validated here)
        rng: Random source used for every (re)seed
        on_cell_state_changed: Render callback, once per toggled cell
        on_won: Called once on each PLAYING -> WON transition

    Raises:
        InvalidConfiguration: If config is invalid
    """

    def __init__(
        self,
        config: PuzzleConfig,
        rng: RandomSource,
        on_cell_state_changed: Optional[CellCallback] = None,
        on_won: Optional[WonCallback] = None,
    ) -> None:
        self._config = config.validate()
        self._rng = rng
        self._on_cell_state_changed = on_cell_state_changed
        self._grid = Grid(config.width, config.height)
        self._detector = WinDetector(on_won)
        self._solution = SolutionMask(0)
        self._move_count = 0
        self._seed_origins: tuple[Coord, ...] = ()
        self._seed()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def config(self) -> PuzzleConfig:
        return self._config

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def solution(self) -> SolutionMask:
        return self._solution

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def state(self) -> PuzzleState:
        return self._detector.state

    @property
    def seed_origins(self) -> tuple[Coord, ...]:
        """Origins clicked by the generator for the current puzzle."""
        return self._seed_origins

    def snapshot(self) -> PuzzleSnapshot:
        return PuzzleSnapshot(
            grid=self._grid.copy(),
            solution=self._solution,
            move_count=self._move_count,
            state=self._detector.state,
        )

    def solution_origins(self) -> list[Coord]:
        """
        Cells that still need an odd number of clicks, in bit index order.

        Clicking each of them once (in any order) solves the puzzle from the
        current state.
        """
        height = self._grid.height
        return [
            from_index(index, height)
            for index in iter_set_indices(self._solution, self._grid.total_cells)
        ]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, x: int, y: int) -> MoveResult:
        """
        Player click at (x, y).

        Returns:
            MoveResult with the toggled cells, the new move count and the
            state after the win check. Once WON, moves are ignored: no cell
            changes, the count stays put and the state stays WON.

        Raises:
            InvalidCoordinate: If x or y is not an integer or (x, y) is
                outside the grid; nothing changes
        """
        if not (
            isinstance(x, Integral)
            and isinstance(y, Integral)
            and self._grid.in_bounds(x, y)
        ):
            raise InvalidCoordinate(x, y, self._grid.width, self._grid.height)
        x, y = int(x), int(y)

        if self._detector.state is PuzzleState.WON:
            logger.debug("Ignoring move (%d, %d): puzzle already won", x, y)
            return MoveResult((), self._move_count, PuzzleState.WON)

        self._solution, touched = flip_origin_and_neighbors(
            self._grid, self._solution, x, y, self._on_cell_state_changed
        )
        self._move_count += 1
        state = self._detector.observe(self._solution)
        logger.debug(
            "Move %d at (%d, %d): solution=%#x state=%s",
            self._move_count, x, y, self._solution, state.value,
        )
        return MoveResult(tuple(touched), self._move_count, state)

    def reset(self) -> PuzzleSnapshot:
        """
        Start a new puzzle with the same configuration and random source.

        Lit cells are switched off (the render callback hears about each),
        the accumulator and move count go to 0, the state returns to PLAYING
        and the generator runs again.

        If the random source raises, the exception propagates and the
        current puzzle is left exactly as it was.
        """
        self._seed()
        return self.snapshot()

    def _seed(self) -> None:
        """
        Generate on a fresh grid, then swap it in.

        Nothing on the engine changes and no render notification fires
        until seed_puzzle has returned.
        """
        grid = Grid(self._config.width, self._config.height)
        toggles = []
        result = seed_puzzle(
            grid,
            self._rng,
            self._config.min_steps,
            self._config.max_steps,
            on_cell_state_changed=lambda x, y, lit: toggles.append((x, y, lit)),
        )

        if self._on_cell_state_changed is not None:
            for x, y in self._grid.lit_cells():
                self._on_cell_state_changed(x, y, False)
            for x, y, lit in toggles:
                self._on_cell_state_changed(x, y, lit)

        self._grid = grid
        self._solution = result.solution
        self._seed_origins = result.origins
        self._move_count = 0
        self._detector.reset()
        logger.debug(
            "New %d×%d puzzle: %d origins, solution=%#x",
            self._grid.width, self._grid.height,
            len(result.origins), self._solution,
        )


def new_puzzle(
    width: int,
    height: int,
    min_steps: int,
    max_steps: int,
    rng: RandomSource,
    on_cell_state_changed: Optional[CellCallback] = None,
    on_won: Optional[WonCallback] = None,
) -> PuzzleEngine:
    """
    Build and seed a puzzle.

    The returned engine starts with move_count 0 and state PLAYING; its
    snapshot() gives (grid, solution, move_count, state).

    Raises:
        InvalidConfiguration: If dimensions or the step range are invalid
    """
    config = PuzzleConfig(
        width=width, height=height, min_steps=min_steps, max_steps=max_steps
    )
    return PuzzleEngine(config, rng, on_cell_state_changed, on_won)

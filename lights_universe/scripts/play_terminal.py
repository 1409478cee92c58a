#!/usr/bin/env python3
"""
Terminal front-end for the Lights-Out engine.

Presentation only: the engine reports toggled cells through its render
callback and the won sink; this script draws the board, the move counter
and the play timer.

Commands:
    x y   click the cell at column x, row y
    r     new puzzle
    s     show the cells that still need a click
    q     quit

Usage:
    python play_terminal.py --width 5 --height 5 --min-steps 3 --max-steps 5
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lo_core.errors import InvalidConfiguration, InvalidCoordinate
from lo_core.grid import Grid
from lo_core.rng import NumpyRandomSource
from lo_core.types import PuzzleState
from lo_engine.config import PuzzleConfig
from lo_engine.engine import PuzzleEngine

LIT = "#"
DARK = "."
USAGE = "Enter 'x y', 'r', 's' or 'q'"


def parse_click(line: str) -> Optional[Tuple[int, int]]:
    """Parse 'x y' or 'x,y' into a coordinate pair, None if malformed."""
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def format_play_time(seconds: float) -> str:
    """'Play Time: MM:SS' with minutes not wrapped at 60."""
    minutes, secs = divmod(int(seconds), 60)
    return f"Play Time: {minutes:02d}:{secs:02d}"


def render_board(grid: Grid) -> str:
    """Board as text, row 0 at the bottom (y grows upwards)."""
    lines = []
    for y in reversed(range(grid.height)):
        row = " ".join(LIT if grid.is_lit(x, y) else DARK for x in range(grid.width))
        lines.append(f"{y:>2} | {row}")
    lines.append("   +" + "-" * (2 * grid.width))
    lines.append("     " + " ".join(str(x % 10) for x in range(grid.width)))
    return "\n".join(lines)


class TerminalSession:
    """Keeps the HUD state the engine does not own: dirty cells and the timer."""

    def __init__(self, config: PuzzleConfig, seed=None) -> None:
        self.changed = []
        self.won = False
        self.started_at = time.monotonic()
        self.engine = PuzzleEngine(
            config,
            NumpyRandomSource(seed),
            on_cell_state_changed=self.on_cell_state_changed,
            on_won=self.on_won,
        )
        self.finished_after = None

    def on_cell_state_changed(self, x: int, y: int, lit: bool) -> None:
        self.changed.append((x, y, lit))

    def on_won(self) -> None:
        self.won = True
        self.finished_after = time.monotonic() - self.started_at

    def play_time(self) -> float:
        if self.finished_after is not None:
            return self.finished_after
        return time.monotonic() - self.started_at

    def play_again(self) -> None:
        self.engine.reset()
        self.won = False
        self.finished_after = None
        self.started_at = time.monotonic()

    def hud(self) -> str:
        return f"Moves: {self.engine.move_count}    {format_play_time(self.play_time())}"

    def draw(self) -> None:
        print()
        print(render_board(self.engine.grid))
        if self.changed:
            print(f"Toggled {len(self.changed)} cells")
        print(self.hud())
        self.changed.clear()


def main():
    parser = argparse.ArgumentParser(description="Play Lights-Out in the terminal")
    parser.add_argument("--width", type=int, default=5, help="Grid width")
    parser.add_argument("--height", type=int, default=5, help="Grid height")
    parser.add_argument("--min-steps", type=int, default=3, help="Minimum seed origins")
    parser.add_argument("--max-steps", type=int, default=5, help="Maximum seed origins")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--clamp", action="store_true",
                        help="Clamp the step range into [1, width*height] instead of failing")
    parser.add_argument("--verbose", action="store_true", help="Log engine events")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = PuzzleConfig(args.width, args.height, args.min_steps, args.max_steps)
    if args.clamp:
        config = config.with_clamped_steps()

    try:
        session = TerminalSession(config, args.seed)
    except InvalidConfiguration as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    session.draw()
    while True:
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line in ("q", "quit"):
            break
        if line in ("r", "restart"):
            session.play_again()
            session.draw()
            continue
        if line in ("s", "solve"):
            print("Click:", " ".join(f"({x},{y})" for x, y in session.engine.solution_origins()))
            continue

        click = parse_click(line)
        if click is None:
            print(USAGE)
            continue

        x, y = click
        try:
            result = session.engine.apply_move(x, y)
        except InvalidCoordinate as e:
            print(e)
            continue

        session.draw()
        if result.state is PuzzleState.WON:
            print(f"You won in {result.move_count} moves! Play again? [y/n]")
            try:
                answer = input("> ").strip().lower()
            except EOFError:
                break
            if answer not in ("y", "yes"):
                break
            session.play_again()
            session.draw()


if __name__ == "__main__":
    main()

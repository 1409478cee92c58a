#!/usr/bin/env python3
"""
Solvability Gate: generator + engine end-to-end.

For each sampled seed:
- Generate the puzzle twice with the same seed (deterministic board)
- Replay the seed origins in a shuffled order (must reach WON)
- Replay after random extra clicks, then click solution_origins() (must reach WON)
- Cross-check that a zero accumulator always comes with a dark board

Usage:
    python run_gate_solvable.py --limit 100 --width 5 --height 5
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lo_core.errors import PuzzleError
from lo_core.order_hash import board_hash
from lo_core.rng import NumpyRandomSource
from lo_core.types import PuzzleState
from lo_engine.config import PuzzleConfig
from lo_engine.engine import PuzzleEngine

from utils import (
    build_receipt,
    compute_summary_stats,
    grid_to_bytes,
    sample_seeds,
    save_receipt,
    setup_logger,
)

GATE = "solvable"


def replay_shuffled(engine: PuzzleEngine, shuffler: random.Random) -> PuzzleState:
    """Click the seed origins once each, in a shuffled order."""
    origins = list(engine.seed_origins)
    shuffler.shuffle(origins)
    state = engine.state
    for x, y in origins:
        state = engine.apply_move(x, y).state
    return state


def replay_after_noise(engine: PuzzleEngine, shuffler: random.Random) -> Tuple[PuzzleState, int]:
    """
    Click random cells, then the decoded remaining solution.

    Returns:
        (final_state, noise_clicks)
    """
    noise_clicks = 0
    for cell in list(engine.grid.cells()):
        if engine.state is PuzzleState.WON:
            break
        if shuffler.random() < 0.5:
            engine.apply_move(cell.x, cell.y)
            noise_clicks += 1

    for x, y in engine.solution_origins():
        engine.apply_move(x, y)
    return engine.state, noise_clicks


def run_seed(seed: int, config: PuzzleConfig, logger: logging.Logger) -> Dict[str, Any]:
    puzzle_id = f"seed_{seed}"
    try:
        # ============================
        # RUN 1 / RUN 2: determinism
        # ============================
        engine1 = PuzzleEngine(config, NumpyRandomSource(seed))
        engine2 = PuzzleEngine(config, NumpyRandomSource(seed))
        deterministic = (
            grid_to_bytes(engine1.grid) == grid_to_bytes(engine2.grid)
            and engine1.solution == engine2.solution
        )
        if not deterministic:
            logger.error(f"Puzzle {puzzle_id}: NOT DETERMINISTIC! Boards differ between runs")

        origins = len(engine1.seed_origins)
        initial_lit = engine1.grid.lit_count()
        fingerprint = board_hash(engine1.grid)
        distinct = len(set(engine1.seed_origins)) == origins
        in_range = config.min_steps <= origins <= config.max_steps

        # ============================
        # Replay: shuffled seed origins
        # ============================
        shuffler = random.Random(seed)
        shuffled_state = replay_shuffled(engine1, shuffler)
        scan_agrees_shuffled = engine1.solution != 0 or engine1.grid.all_dark()

        # ============================
        # Replay: noise + decoded solution
        # ============================
        noisy_state, noise_clicks = replay_after_noise(engine2, shuffler)
        scan_agrees_noisy = engine2.solution != 0 or engine2.grid.all_dark()

        logger.info(
            f"Puzzle {puzzle_id}: origins={origins}, lit={initial_lit}, "
            f"shuffled={shuffled_state.value}, noisy={noisy_state.value} "
            f"after {noise_clicks} extra clicks"
        )

        errors = []
        if not deterministic:
            errors.append("Not deterministic")
        if not distinct:
            errors.append("Duplicate seed origins")
        if not in_range:
            errors.append(f"origins={origins} outside [{config.min_steps}, {config.max_steps}]")
        if shuffled_state is not PuzzleState.WON:
            errors.append("Shuffled replay did not win")
        if noisy_state is not PuzzleState.WON:
            errors.append("Replay after noise did not win")
        if not (scan_agrees_shuffled and scan_agrees_noisy):
            errors.append("Zero accumulator on a lit board")

        return build_receipt(
            puzzle_id,
            GATE,
            metrics={
                "seed": seed,
                "origins": origins,
                "seed_origins": [list(o) for o in engine1.seed_origins],
                "initial_lit": initial_lit,
                "board_hash": fingerprint,
                "deterministic": deterministic,
                "noise_clicks": noise_clicks,
                "moves_to_win": engine2.move_count,
            },
            status="FAIL" if errors else "PASS",
            error="; ".join(errors) if errors else None,
        )

    except PuzzleError as e:
        logger.error(f"Puzzle {puzzle_id}: {e}")
        return build_receipt(puzzle_id, GATE, status="FAIL", error=str(e))


def main():
    parser = argparse.ArgumentParser(description="Solvability Gate")
    parser.add_argument("--limit", type=int, default=100, help="Number of puzzles to test")
    parser.add_argument("--width", type=int, default=5, help="Grid width")
    parser.add_argument("--height", type=int, default=5, help="Grid height")
    parser.add_argument("--min-steps", type=int, default=3, help="Minimum seed origins")
    parser.add_argument("--max-steps", type=int, default=5, help="Maximum seed origins")
    parser.add_argument("--seed", type=int, default=42, help="Master random seed")
    args = parser.parse_args()

    config = PuzzleConfig(args.width, args.height, args.min_steps, args.max_steps)

    log_dir = Path(__file__).parent / "logs"
    logger = setup_logger("gate_solvable", log_dir / "gate_solvable.log")

    receipts_dir = Path(__file__).parent / "receipts" / "gate_solvable"

    logger.info("=" * 80)
    logger.info("Solvability Gate - GENERATOR + ENGINE")
    logger.info(f"Board: {config.width}×{config.height}, steps [{config.min_steps}, {config.max_steps}]")
    logger.info(f"Puzzle limit: {args.limit}")
    logger.info(f"Master seed: {args.seed}")
    logger.info("=" * 80)

    try:
        config.validate()
    except PuzzleError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)

    receipts = []
    for seed in sample_seeds(args.limit, args.seed):
        receipt = run_seed(seed, config, logger)
        save_receipt(receipt, receipts_dir)
        receipts.append(receipt)

    stats = compute_summary_stats(receipts)

    logger.info("\n" + "=" * 80)
    logger.info("SUMMARY STATISTICS")
    logger.info("=" * 80)
    logger.info(f"Total puzzles: {stats['total_puzzles']}")
    logger.info(f"Passed: {stats['passed']}")
    logger.info(f"Failed: {stats['failed']}")
    logger.info(f"Pass rate: {stats['pass_rate'] * 100:.1f}%")
    if "boards" in stats:
        boards = stats["boards"]
        logger.info(f"Average origins: {boards['avg_origins']:.2f} (max {boards['max_origins']})")
        logger.info(f"Average lit cells at start: {boards['avg_initial_lit']:.2f}")
        logger.info(f"Deterministic boards: {boards['determinism_pass_rate'] * 100:.1f}%")
    logger.info("=" * 80)
    logger.info(f"Solvability gate complete. Receipts saved to: {receipts_dir}")
    logger.info("=" * 80)

    if stats["failed"]:
        sys.exit(1)


if __name__ == "__main__":
    main()

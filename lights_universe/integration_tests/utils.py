"""
Utility functions for Lights-Out integration gates.

Provides:
- Seed sampling
- Board serialization for receipts
- Receipt generation and saving
- Summary statistics
- Logging setup
"""

import json
import logging
import random
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from lo_core.grid import Grid


def sample_seeds(n: int, seed: Optional[int] = None) -> List[int]:
    """
    Draw N distinct puzzle seeds.

    Args:
        n: Number of seeds
        seed: Optional master seed for reproducibility

    Returns:
        List of N distinct non-negative seeds
    """
    sampler = random.Random(seed)
    return sampler.sample(range(2**31), n)


def grid_to_bytes(grid: Grid) -> bytes:
    """Convert grid to deterministic byte representation for comparison."""
    return json.dumps(grid.to_rows(), sort_keys=True).encode("utf-8")


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for integration gates.

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def build_receipt(
    puzzle_id: str,
    gate: str,
    metrics: Optional[Dict[str, Any]] = None,
    status: str = "PASS",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one puzzle.

    Args:
        puzzle_id: Puzzle identifier (e.g., "seed_1234")
        gate: Gate name
        metrics: Gate-specific measurements
        status: "PASS" or "FAIL"
        error: Error message if status is FAIL

    Returns:
        Receipt dictionary
    """
    receipt = {
        "puzzle_id": puzzle_id,
        "gate": gate,
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if metrics is not None:
        receipt["metrics"] = metrics

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> None:
    """
    Save receipt to JSON file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt (e.g., receipts/gate_solvable/)
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{receipt['puzzle_id']}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Compute summary statistics from a list of receipts.

    Args:
        receipts: List of receipt dictionaries

    Returns:
        Summary statistics dictionary
    """
    total = len(receipts)
    passed = sum(1 for r in receipts if r["status"] == "PASS")

    stats = {
        "total_puzzles": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": passed / total if total > 0 else 0.0,
    }

    metric_receipts = [r for r in receipts if "metrics" in r]
    if metric_receipts:
        origins = [r["metrics"]["origins"] for r in metric_receipts]
        lit = [r["metrics"]["initial_lit"] for r in metric_receipts]
        stats["boards"] = {
            "avg_origins": sum(origins) / len(origins),
            "max_origins": max(origins),
            "avg_initial_lit": sum(lit) / len(lit),
            "determinism_pass_rate": sum(
                1 for r in metric_receipts if r["metrics"].get("deterministic", False)
            ) / len(metric_receipts),
        }

    return stats

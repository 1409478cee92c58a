"""
Deterministic hashing of board state.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- board_hash: Fingerprint of a grid's dimensions and lit cells

No use of Python's built-in hash() (randomized per process).
"""

import hashlib
import json
from typing import Any

from .grid import Grid
from .types import Hash64


def hash64(obj: Any) -> Hash64:
    """
    Deterministic 64-bit hash using SHA-256 on canonical JSON.

    - Canonical JSON serialization (sorted keys, no whitespace)
    - First 8 bytes of the digest, big-endian

    Args:
        obj: Any JSON-serializable Python object

    Returns:
        64-bit integer hash (0 to 2^64-1)

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    sha = hashlib.sha256(canonical_json.encode("utf-8"))
    hash_int = int.from_bytes(sha.digest()[:8], byteorder="big", signed=False)
    return Hash64(hash_int)


def board_hash(grid: Grid) -> Hash64:
    """
    Fingerprint of a grid: dimensions plus lit state.

    Two grids with equal dimensions and identical lit cells always hash
    equal, across processes and runs.
    """
    return hash64({
        "width": grid.width,
        "height": grid.height,
        "rows": grid.to_rows(),
    })

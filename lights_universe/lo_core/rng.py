"""
Injectable uniform random sources.

The generator only needs two draws:
- next_int(low, high_inclusive): uniform integer in [low, high_inclusive]
- next_float01(): uniform float in [0, 1)

NumpyRandomSource is the production source. ScriptedRandomSource replays
fixed sequences so tests can pin exactly which cells get selected.
"""

from collections import deque
from typing import Iterable, Optional, Protocol

import numpy as np

from .errors import RandomSourceExhausted


class RandomSource(Protocol):
    def next_int(self, low: int, high_inclusive: int) -> int:
        ...

    def next_float01(self) -> float:
        ...


class NumpyRandomSource:
    """Random source backed by numpy.random.Generator (PCG64)."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_int(self, low: int, high_inclusive: int) -> int:
        return int(self._rng.integers(low, high_inclusive, endpoint=True))

    def next_float01(self) -> float:
        return float(self._rng.random())


class ScriptedRandomSource:
    """
    Random source that replays fixed sequences.

    Integer draws come from `ints` and float draws from `floats`, each in
    order. Integer values are not clamped to the requested range; the script
    is trusted to match the caller's bounds.

    Raises:
        RandomSourceExhausted: When a sequence is empty at draw time
    """

    def __init__(self, ints: Iterable[int] = (), floats: Iterable[float] = ()) -> None:
        self._ints = deque(ints)
        self._floats = deque(floats)

    def next_int(self, low: int, high_inclusive: int) -> int:
        if not self._ints:
            raise RandomSourceExhausted(
                f"No scripted integer left for range [{low}, {high_inclusive}]"
            )
        return self._ints.popleft()

    def next_float01(self) -> float:
        if not self._floats:
            raise RandomSourceExhausted("No scripted float left")
        return self._floats.popleft()

    @property
    def remaining(self) -> tuple[int, int]:
        """(ints left, floats left)"""
        return len(self._ints), len(self._floats)

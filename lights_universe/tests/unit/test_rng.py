"""
Unit tests for lo_core/rng.py.
"""

import pytest

from lo_core.errors import RandomSourceExhausted
from lo_core.rng import NumpyRandomSource, ScriptedRandomSource


class TestNumpyRandomSource:
    """Seeded numpy-backed source."""

    def test_same_seed_same_draws(self):
        a = NumpyRandomSource(7)
        b = NumpyRandomSource(7)
        assert [a.next_int(0, 24) for _ in range(20)] == [b.next_int(0, 24) for _ in range(20)]
        assert [a.next_float01() for _ in range(20)] == [b.next_float01() for _ in range(20)]

    def test_next_int_inclusive_bounds(self):
        rng = NumpyRandomSource(0)
        draws = {rng.next_int(3, 5) for _ in range(500)}
        assert draws == {3, 4, 5}

    def test_next_int_degenerate_range(self):
        rng = NumpyRandomSource(0)
        assert all(rng.next_int(4, 4) == 4 for _ in range(10))

    def test_next_float01_range(self):
        rng = NumpyRandomSource(1)
        for _ in range(1000):
            value = rng.next_float01()
            assert 0.0 <= value < 1.0
            assert type(value) is float


class TestScriptedRandomSource:
    """Fixed sequences for deterministic tests."""

    def test_replays_in_order(self):
        rng = ScriptedRandomSource(ints=[3, 1], floats=[0.5, 0.25])
        assert rng.next_int(0, 10) == 3
        assert rng.next_float01() == 0.5
        assert rng.next_int(0, 10) == 1
        assert rng.next_float01() == 0.25
        assert rng.remaining == (0, 0)

    def test_exhausted_ints(self):
        rng = ScriptedRandomSource()
        with pytest.raises(RandomSourceExhausted):
            rng.next_int(0, 1)

    def test_exhausted_floats(self):
        rng = ScriptedRandomSource(ints=[1])
        with pytest.raises(RandomSourceExhausted, match="float"):
            rng.next_float01()

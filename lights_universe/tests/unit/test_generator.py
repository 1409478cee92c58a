"""
Unit tests for lo_engine/generator.py.

Scripted random sources pin exactly which indices are selected:
- ints: [origin_count, rotation_offset]
- floats: one roll per scanned index until the count is met
"""

from collections import Counter
from functools import reduce

import pytest

from lo_core.codec import index_bit
from lo_core.errors import RandomSourceExhausted
from lo_core.grid import Grid
from lo_core.rng import NumpyRandomSource, ScriptedRandomSource
from lo_engine.generator import rotated_index, seed_puzzle


def rolls_selecting(index: int, filler: float = 0.99) -> list:
    """Rolls that skip indices 1..index-1 and take `index` (single origin)."""
    return [filler] * (index - 1) + [0.0]


# =============================================================================
# Rotation
# =============================================================================

class TestRotatedIndex:

    def test_zero_offset_is_identity(self):
        assert [rotated_index(i, 0, 25) for i in range(1, 26)] == list(range(1, 26))

    def test_wraps_to_one_not_zero(self):
        assert rotated_index(25, 1, 25) == 1
        assert rotated_index(1, 24, 25) == 25

    @pytest.mark.parametrize("offset", [0, 1, 7, 24])
    def test_is_permutation(self, offset):
        assert sorted(rotated_index(i, offset, 25) for i in range(1, 26)) == list(range(1, 26))


# =============================================================================
# Scripted selections
# =============================================================================

class TestScriptedSelection:

    def test_center_cell_selected(self):
        """One origin, offset 0, roll sequence taking bit 13 -> (2, 2)."""
        grid = Grid(5, 5)
        rng = ScriptedRandomSource(ints=[1, 0], floats=rolls_selecting(13))

        result = seed_puzzle(grid, rng, 1, 1)

        assert result.solution == 1 << 13
        assert result.origins == ((2, 2),)
        assert result.requested_steps == 1
        assert set(grid.lit_cells()) == {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}

    def test_offset_rotates_selection(self):
        """First roll taken with offset 5 selects bit 6 -> (1, 0)."""
        grid = Grid(5, 5)
        rng = ScriptedRandomSource(ints=[1, 5], floats=[0.0])

        result = seed_puzzle(grid, rng, 1, 1)

        assert result.origins == ((1, 0),)
        assert result.solution == 1 << 6

    def test_early_exit_stops_drawing(self):
        """Once the quota is met no further rolls are drawn."""
        grid = Grid(5, 5)
        rng = ScriptedRandomSource(ints=[1, 0], floats=[0.0])

        seed_puzzle(grid, rng, 1, 1)

        assert rng.remaining == (0, 0)

    def test_roll_equal_to_probability_selects(self):
        """Selection uses roll <= p."""
        grid = Grid(2, 2)
        # p at i=1 is 1/4
        rng = ScriptedRandomSource(ints=[1, 0], floats=[0.25])

        result = seed_puzzle(grid, rng, 1, 1)

        assert result.origins == ((0, 0),)

    def test_last_index_forced(self):
        """With rolls just below 1, p reaches 1 exactly when needed."""
        grid = Grid(5, 5)
        rng = ScriptedRandomSource(ints=[2, 0], floats=[0.999999] * 25)

        result = seed_puzzle(grid, rng, 2, 2)

        assert result.origins == ((4, 3), (4, 4))

    def test_every_cell_selected(self):
        """k = n selects all cells; corners and interior end lit, edges dark."""
        grid = Grid(5, 5)
        rng = ScriptedRandomSource(ints=[25, 3], floats=[0.5] * 25)

        result = seed_puzzle(grid, rng, 25, 25)

        assert len(result.origins) == 25
        assert result.solution == (1 << 26) - 2
        assert grid.lit_count() == 13
        for corner in [(0, 0), (0, 4), (4, 0), (4, 4)]:
            assert grid.is_lit(*corner)
        assert not grid.is_lit(0, 2)
        assert grid.is_lit(2, 2)

    def test_exhausted_source_propagates(self):
        grid = Grid(5, 5)
        with pytest.raises(RandomSourceExhausted):
            seed_puzzle(grid, ScriptedRandomSource(ints=[1, 0], floats=[0.99]), 1, 1)

    def test_callback_forwarded(self):
        grid = Grid(5, 5)
        calls = []
        rng = ScriptedRandomSource(ints=[1, 0], floats=[0.0])
        seed_puzzle(grid, rng, 1, 1, on_cell_state_changed=lambda x, y, lit: calls.append((x, y, lit)))
        assert sorted(calls) == [(0, 0, True), (0, 1, True), (1, 0, True)]


# =============================================================================
# Randomized properties
# =============================================================================

class TestGeneratedPuzzles:

    @pytest.mark.parametrize("seed", range(30))
    def test_distinct_origins_in_range(self, seed):
        grid = Grid(5, 5)
        result = seed_puzzle(grid, NumpyRandomSource(seed), 3, 8)

        assert 3 <= len(result.origins) <= 8
        assert len(result.origins) == result.requested_steps
        assert len(set(result.origins)) == len(result.origins)

    @pytest.mark.parametrize("seed", range(30))
    def test_solution_is_xor_of_origin_bits(self, seed):
        grid = Grid(4, 6)
        result = seed_puzzle(grid, NumpyRandomSource(seed), 1, 24)

        expected = reduce(lambda acc, o: acc ^ index_bit(o[0], o[1], 6), result.origins, 0)
        assert result.solution == expected

    def test_selection_roughly_uniform(self):
        """Each cell of a 3×3 board is chosen about 2/9 of the time."""
        rng = NumpyRandomSource(1234)
        counts = Counter()
        trials = 3000
        for _ in range(trials):
            result = seed_puzzle(Grid(3, 3), rng, 2, 2)
            counts.update(result.origins)

        expected = trials * 2 / 9
        assert len(counts) == 9
        for cell, count in counts.items():
            assert abs(count - expected) < 150, f"{cell} chosen {count} times"

"""
Unit tests for lo_engine/win.py.
"""

from lo_core.types import PuzzleState
from lo_engine.win import WinDetector, is_solved


class TestIsSolved:

    def test_zero_is_solved(self):
        assert is_solved(0)

    def test_any_bit_is_unsolved(self):
        assert not is_solved(1 << 13)
        assert not is_solved(1 << 25)


class TestWinDetector:
    """PLAYING -> WON, terminal until reset."""

    def test_starts_playing(self):
        assert WinDetector().state is PuzzleState.PLAYING

    def test_stays_playing_while_nonzero(self):
        detector = WinDetector()
        assert detector.observe(1 << 4) is PuzzleState.PLAYING

    def test_transitions_on_zero(self):
        detector = WinDetector()
        assert detector.observe(0) is PuzzleState.WON
        assert detector.state is PuzzleState.WON

    def test_won_is_terminal(self):
        detector = WinDetector()
        detector.observe(0)
        assert detector.observe(1 << 3) is PuzzleState.WON

    def test_sink_fires_once_per_transition(self):
        fired = []
        detector = WinDetector(on_won=lambda: fired.append(True))
        detector.observe(0)
        detector.observe(0)
        detector.observe(1 << 2)
        assert fired == [True]

    def test_reset_returns_to_playing(self):
        fired = []
        detector = WinDetector(on_won=lambda: fired.append(True))
        detector.observe(0)
        detector.reset()
        assert detector.state is PuzzleState.PLAYING
        detector.observe(0)
        assert len(fired) == 2

"""
Error types raised by the Lights-Out engine.

All failures are local and recoverable: the caller decides whether to retry
with corrected input.
"""


class PuzzleError(ValueError):
    """Base class for engine failures."""


class InvalidCoordinate(PuzzleError):
    """Raised when a move targets a cell outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinate ({x}, {y}) outside {width}×{height} grid"
        )


class InvalidConfiguration(PuzzleError):
    """Raised at puzzle creation for bad dimensions or step ranges."""


class RandomSourceExhausted(PuzzleError):
    """Raised when a scripted random source has no values left."""

"""
Puzzle configuration.

Defaults reproduce the classic 5×5 board seeded with 3 to 5 origin clicks.
"""

from dataclasses import dataclass, replace

from lo_core.errors import InvalidConfiguration

DEFAULT_WIDTH = 5
DEFAULT_HEIGHT = 5
DEFAULT_MIN_STEPS = 3
DEFAULT_MAX_STEPS = 5


@dataclass(frozen=True)
class PuzzleConfig:
    """
    Board dimensions and the inclusive range of seed origin clicks.

    Valid when width, height >= 1 and
    1 <= min_steps <= max_steps <= width * height.
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    min_steps: int = DEFAULT_MIN_STEPS
    max_steps: int = DEFAULT_MAX_STEPS

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def validate(self) -> "PuzzleConfig":
        """
        Check dimensions and step range.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidConfiguration: On any violated bound (never clamps)
        """
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration(
                f"Grid dimensions must be >= 1, got {self.width}×{self.height}"
            )
        total = self.total_cells
        if not 1 <= self.min_steps <= total:
            raise InvalidConfiguration(
                f"min_steps={self.min_steps} outside [1, {total}]"
            )
        if not 1 <= self.max_steps <= total:
            raise InvalidConfiguration(
                f"max_steps={self.max_steps} outside [1, {total}]"
            )
        if self.min_steps > self.max_steps:
            raise InvalidConfiguration(
                f"min_steps={self.min_steps} > max_steps={self.max_steps}"
            )
        return self

    def with_clamped_steps(self) -> "PuzzleConfig":
        """
        Copy with the step range forced into a valid shape.

        Caller-side policy: both bounds limited to [1, width * height], then
        max_steps raised to min_steps if needed. Dimensions are untouched.
        """
        total = max(self.total_cells, 1)
        min_steps = min(max(self.min_steps, 1), total)
        max_steps = min(max(self.max_steps, 1), total)
        return replace(self, min_steps=min_steps, max_steps=max(min_steps, max_steps))

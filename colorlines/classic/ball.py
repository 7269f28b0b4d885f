"""Ball colours and the ball that occupies a grid cell."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BallColor(Enum):
    """Colour of a ball; ``EMPTY`` marks a cell without a ball."""

    EMPTY = "empty"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    PURPLE = "purple"


@dataclass
class Ball:
    """The content of a single cell."""

    color: BallColor = BallColor.EMPTY

    def is_empty(self) -> bool:
        """Return True when the cell holds no ball."""
        return self.color is BallColor.EMPTY
"""Axis-aligned collision rectangles and collision directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CollisionDirection(Enum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


@dataclass(frozen=True)
class CollisionRect:
    """A rectangle in screen coordinates, y growing downwards."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, other: "CollisionRect") -> bool:
        """True when ``other`` lies entirely within this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: "CollisionRect") -> bool:
        """True when the rectangles overlap; touching edges do not count."""
        return not (
            other.right <= self.x
            or other.bottom <= self.y
            or other.x >= self.right
            or other.y >= self.bottom
        )

    def shift(self, dx: float, dy: float) -> "CollisionRect":
        """Return a copy moved by ``dx``, ``dy``."""
        return CollisionRect(self.x + dx, self.y + dy, self.width, self.height)
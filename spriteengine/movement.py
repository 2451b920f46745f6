"""Speed tracking with per-axis limits for moving scene objects."""

from __future__ import annotations

from typing import Sequence

SPEED_LIMIT = (1.0, 5.0)


def _clamp(value: float, limit: float) -> float:
    if abs(value) > limit:
        return limit if value > 0 else -limit
    return value


class Movement:
    """A 2D speed whose components are held within ``SPEED_LIMIT``."""

    def __init__(self) -> None:
        self._speed_x = 0.0
        self._speed_y = 0.0
        self._limit_x, self._limit_y = SPEED_LIMIT

    @property
    def speed(self) -> tuple[float, float]:
        """The current ``(x, y)`` speed."""
        return (self._speed_x, self._speed_y)

    def set_speed(self, speed: Sequence[float]) -> None:
        """Set both speed components, clamped to the limits."""
        x, y = speed
        self._speed_x = float(x)
        self._speed_y = float(y)
        self._check_limits()

    def stop(self) -> None:
        """Set the speed to zero."""
        self._speed_x = 0.0
        self._speed_y = 0.0

    def inc_horizontal_speed(self, dx: float) -> None:
        """Add ``dx`` to the horizontal speed, then clamp."""
        self._speed_x += dx
        self._check_limits()

    def inc_vertical_speed(self, dy: float) -> None:
        """Add ``dy`` to the vertical speed, then clamp."""
        self._speed_y += dy
        self._check_limits()

    def is_moving(self, consider_vertical: bool = False) -> bool:
        """True when moving horizontally; with ``consider_vertical``, on both axes."""
        if consider_vertical:
            return self._speed_x != 0.0 and self._speed_y != 0.0
        return self._speed_x != 0.0

    def _check_limits(self) -> None:
        self._speed_x = _clamp(self._speed_x, self._limit_x)
        self._speed_y = _clamp(self._speed_y, self._limit_y)
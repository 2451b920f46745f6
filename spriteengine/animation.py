"""Frame animations and an animator that switches between them."""

from __future__ import annotations

from typing import Iterable

from .collection import Collection
from .resource import Resource, ResourceType


class Animation(Resource):
    """A cycle of sprite frames advanced once per ``delay`` seconds."""

    def __init__(self, name: str, frames: Iterable[int], delay: float) -> None:
        super().__init__(ResourceType.ANIMATION, name)
        self._frames = list(frames)
        if delay <= 0:
            raise ValueError("animation delay must be positive")
        if not self._frames:
            raise ValueError("animation needs at least one frame")
        self.delay = delay
        self._index = 0
        self._elapsed = 0.0

    @property
    def frames(self) -> tuple[int, ...]:
        return tuple(self._frames)

    def do_animation(self, elapsed: float) -> None:
        """Advance time; step to the next frame once the delay is passed."""
        if elapsed <= 0:
            raise ValueError("elapsed time must be positive")
        self._elapsed += elapsed
        if self._elapsed > self.delay:
            self._index = (self._index + 1) % len(self._frames)
            self._elapsed = 0.0

    def reset(self) -> None:
        """Go back to the first frame."""
        self._index = 0

    @property
    def current_frame(self) -> int:
        return self._frames[self._index]


class Animator(Collection[Animation]):
    """Holds named animations and plays at most one of them."""

    def __init__(self, default_sprite: int = 0) -> None:
        super().__init__()
        self._current: Animation | None = None
        self._running = False
        self.default_sprite = default_sprite

    def add_animation(self, animation: Animation, make_current: bool = False) -> None:
        """Store ``animation`` by name and optionally start playing it."""
        if animation is None:
            raise ValueError("animation must not be None")
        self.add_named(animation)
        if make_current:
            self.set_current_animation(animation.name)

    @property
    def current_animation(self) -> Animation | None:
        return self._current

    @property
    def current_frame(self) -> int:
        """The playing animation's frame, or the default sprite when stopped."""
        if self._running and self._current is not None:
            return self._current.current_frame
        return self.default_sprite

    def set_current_animation(self, name: str) -> None:
        """Start the animation stored as ``name`` from its first frame."""
        if not name:
            raise ValueError("animation name must not be empty")
        animation = self.get(name)
        if animation is None:
            raise KeyError(f"no animation named '{name}'")
        self._current = animation
        animation.reset()
        self._running = True

    def stop_animation(self) -> None:
        self._running = False
        self._current = None

    def do_animation(self, elapsed: float) -> None:
        """Advance the playing animation, if any."""
        if self._running and self._current is not None:
            self._current.do_animation(elapsed)
"""PNG textures with sampler settings."""

from __future__ import annotations

import itertools
import os
from enum import Enum
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .errors import EngineError  # noqa: E402
from .helpers import quote_str  # noqa: E402
from .log import EOL, log, log_error  # noqa: E402
from .resource import Resource, ResourceType  # noqa: E402

EMPTY_TEXTURE_SIZE = (256, 256)

_ids = itertools.count(1)


class Filter(Enum):
    NEAREST = "nearest"
    LINEAR = "linear"
    LINEAR_MIPMAP_LINEAR = "linear_mipmap_linear"


class Wrap(Enum):
    REPEAT = "repeat"
    CLAMP_TO_EDGE = "clamp_to_edge"


class Texture(Resource):
    """An image from the texture data directory.

    A file that cannot be loaded is logged and leaves ``surface`` as None,
    unless ``use_empty`` asks for a blank texture in its place.
    """

    def __init__(self, name: str, use_empty: bool = False) -> None:
        super().__init__(ResourceType.TEXTURE, name, next(_ids))
        self._surface: pygame.Surface | None = None
        self.format: str | None = None
        self.filtering = Filter.LINEAR_MIPMAP_LINEAR
        self.wrap = Wrap.CLAMP_TO_EDGE
        self.bound_unit: int | None = None
        try:
            self._load(use_empty)
        except EngineError as exc:
            log_error("Failed to load texture: ", quote_str(name), EOL, "\t", exc)

    @property
    def surface(self) -> pygame.Surface | None:
        """The pixel data, or None when loading failed."""
        return self._surface

    def bind(self, texture_unit: int = 0) -> None:
        """Attach the texture to ``texture_unit``."""
        self.bound_unit = texture_unit

    def unbind(self) -> None:
        self.bound_unit = None

    def set_filtering(
        self,
        filtering: Filter = Filter.LINEAR_MIPMAP_LINEAR,
        wrap: Wrap = Wrap.CLAMP_TO_EDGE,
    ) -> None:
        """Choose how the texture is sampled and how it wraps."""
        self.bind()
        self.filtering = filtering
        self.wrap = wrap
        self.unbind()

    def _load(self, fallback_to_empty: bool) -> None:
        path = Path(self.name)
        if not path.is_file():
            if not fallback_to_empty:
                raise EngineError("Can't open texture file. Empty texture intended?")
            self._surface = pygame.Surface(EMPTY_TEXTURE_SIZE, pygame.SRCALPHA)
            self.format = "RGBA"
            return
        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise EngineError(str(exc)) from exc
        self.format = "RGBA" if surface.get_flags() & pygame.SRCALPHA else "RGB"
        self._surface = surface
        log("Texture loaded: ", quote_str(self.name))
        self.set_filtering()
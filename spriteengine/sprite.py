"""Quads that draw a texture."""

from __future__ import annotations

import math
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .program import ShaderProgram  # noqa: E402
from .scene_object import QuadObject  # noqa: E402
from .texture import Texture  # noqa: E402


def _check_texture(texture: Texture) -> Texture:
    if texture is None:
        raise ValueError("a sprite needs a texture")
    if not isinstance(texture, Texture):
        raise TypeError("a sprite texture must be a Texture")
    return texture


class Sprite(QuadObject):
    """A quad showing a whole texture, scaled to the sprite's size."""

    def __init__(self, centered: bool, program: ShaderProgram, texture: Texture) -> None:
        super().__init__(centered, program)
        self._texture = _check_texture(texture)

    @property
    def texture(self) -> Texture:
        return self._texture

    @texture.setter
    def texture(self, texture: Texture) -> None:
        self._texture = _check_texture(texture)

    @property
    def screen_rect(self) -> tuple[float, float, float, float]:
        """Left, top, width and height covered on screen."""
        if self.centered:
            return (self.x - self.width, self.y - self.height, 2 * self.width, 2 * self.height)
        return (self.x, self.y, self.width, self.height)

    def render(self, surface: pygame.Surface | None = None) -> None:
        """Draw the sprite onto ``surface``, if one is given."""
        super().render(surface)
        image = self._source_image()
        if surface is not None and image is not None:
            self._blit(surface, image)
        self._unbind()

    def _source_image(self) -> pygame.Surface | None:
        return self._texture.surface

    def _blit(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        left, top, width, height = self.screen_rect
        size = (round(abs(width)), round(abs(height)))
        if 0 in size:
            return
        image = pygame.transform.scale(image, size)
        if width < 0 or height < 0:
            image = pygame.transform.flip(image, width < 0, height < 0)
        dest = pygame.Rect(round(min(left, left + width)), round(min(top, top + height)), *size)
        if self.angle:
            # y grows downwards on screen, so a positive angle turns clockwise.
            center = dest.center
            image = pygame.transform.rotate(image, -math.degrees(self.angle))
            dest = image.get_rect(center=center)
        surface.blit(image, dest)

    def _bind(self) -> None:
        super()._bind()
        self._texture.bind()
"""Sprites cut from a sheet of equally sized pictures, with animations."""

from __future__ import annotations

import math

import pygame

from .animation import Animator
from .program import ShaderProgram
from .sprite import Sprite
from .texture import Filter, Texture, Wrap


class SpriteTile(Sprite, Animator):
    """Shows one cell of a sprite sheet laid out ``items_x`` cells wide."""

    def __init__(
        self,
        centered: bool,
        program: ShaderProgram,
        texture: Texture,
        items_x: int,
        item_count: int,
    ) -> None:
        if items_x <= 0 or item_count <= 0:
            raise ValueError("a sprite sheet needs at least one column and one item")
        Sprite.__init__(self, centered, program, texture)
        Animator.__init__(self)
        self.items_x = items_x
        self.item_count = item_count
        self.items_y = math.ceil(item_count / items_x)
        self._current_sprite = 0
        self.program.set_uniform("spriteCountX", self.items_x)
        self.program.set_uniform("spriteCountY", self.items_y)
        self.set_current_sprite(self._current_sprite)
        self.texture.set_filtering(Filter.LINEAR, Wrap.REPEAT)

    @property
    def current_sprite(self) -> int:
        return self._current_sprite

    def set_current_sprite(self, index: int) -> None:
        """Show cell ``index`` of the sheet."""
        if not 0 <= index < self.item_count:
            raise IndexError(f"sprite {index} outside 0..{self.item_count - 1}")
        self._current_sprite = index
        self.program.set_uniform("spriteCurrent", index)

    def set_mirrored(self, mirrored: bool) -> None:
        """Flip the picture horizontally."""
        self.mirrored = bool(mirrored)
        self.program.set_uniform("mirrorTexture", int(mirrored))

    def animate(self) -> None:
        """Step to the next cell, wrapping before the last one."""
        self.set_current_sprite(self._current_sprite + 1)
        if self._current_sprite >= self.item_count - 1:
            self._current_sprite = 0

    def do_animation(self, elapsed: float) -> None:
        """Advance the playing animation and show its frame."""
        Animator.do_animation(self, elapsed)
        self.set_current_sprite(self.current_frame)

    def render(self, surface: pygame.Surface | None = None) -> None:
        super().render(surface)

    def _source_image(self) -> pygame.Surface | None:
        sheet = self.texture.surface
        if sheet is None:
            return None
        cell_width = sheet.get_width() // self.items_x
        cell_height = sheet.get_height() // self.items_y
        if cell_width == 0 or cell_height == 0:
            return None
        index = self.program.get_uniform("spriteCurrent")
        if index is None:
            index = self._current_sprite
        column = index % self.items_x
        row = (index // self.items_x) % self.items_y
        cell = sheet.subsurface((column * cell_width, row * cell_height, cell_width, cell_height))
        if self.program.get_uniform("mirrorTexture"):
            cell = pygame.transform.flip(cell, True, False)
        return cell
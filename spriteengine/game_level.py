"""Tile maps loaded from TMX files, with per-tile collision rectangles."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

import pygame

from .buffers import VertexUV
from .collision import CollisionDirection, CollisionRect
from .errors import EngineError
from .helpers import quote_str, replace_string
from .log import log, log_error
from .program import ShaderProgram
from .resource import Resource, ResourceType
from .resource_manager import ResourceManager, instance
from .scene_object import SCREEN_HEIGHT, SCREEN_WIDTH, SceneObject, _ortho, _translate
from .texture import Texture

VERTICES_PER_TILE = 6
_FLOATS_PER_VERTEX = 5
_SEPARATORS = re.compile(r"[,\s]+")


@dataclass
class Tile:
    """One cell of a map layer."""

    tile_id: int
    map_x: int
    map_y: int
    rect: CollisionRect
    collidable: bool
    on_screen: bool
    index_shift: int


@dataclass
class TileLayer:
    """A grid of tiles, stored row by row."""

    width: int
    height: int
    tiles: list[Tile] = field(default_factory=list)


def _uint(element: ET.Element, name: str) -> int:
    try:
        return int(element.get(name, "0"))
    except ValueError as exc:
        raise EngineError(f"attribute {quote_str(name)} is not a number") from exc


def _float(element: ET.Element, name: str) -> float:
    try:
        return float(element.get(name, "0"))
    except ValueError as exc:
        raise EngineError(f"attribute {quote_str(name)} is not a number") from exc


def _child(element: ET.Element | None, tag: str) -> ET.Element:
    found = None if element is None else element.find(tag)
    if found is None:
        raise EngineError(f"map has no {quote_str(tag)} element")
    return found


def _gids(text: str) -> Iterator[int]:
    """Tile numbers in a layer's data, up to the first token that is not one."""
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        try:
            yield int(token)
        except ValueError:
            return


class GameLevel(SceneObject, Resource):
    """A tile map from the maps data directory, scaled to fill the screen height."""

    def __init__(
        self,
        program: ShaderProgram,
        resource_name: str,
        manager: ResourceManager | None = None,
    ) -> None:
        self._map_width = 0
        self._map_height = 0
        self._tile_size = 0.0
        SceneObject.__init__(self, program)
        Resource.__init__(self, ResourceType.GAME_LEVEL, resource_name)
        if manager is None:
            manager = instance()
        self._layers: dict[str, TileLayer] = {}
        self._cells: dict[int, pygame.Surface | None] = {}

        log("Opening game level: ", quote_str(self.name))
        root = self._read_map()

        first_layer = _child(root, "layer")
        self._map_width = _uint(first_layer, "width")
        self._map_height = _uint(first_layer, "height")
        if self._map_width <= 0 or self._map_height <= 0:
            raise EngineError(f"map {quote_str(self.name)} has no size")

        tileset = _child(root, "tileset")
        source = _child(tileset, "image").get("source")
        if not source:
            raise EngineError("tileset image has no source")
        log("Using tileset: ", quote_str(source))
        self._tileset: Texture = manager.add_texture(replace_string(source, "../Textures/", ""))
        self._tileset.set_filtering()
        self._columns = _uint(tileset, "columns")
        if self._columns <= 0:
            raise EngineError("tileset has no columns")
        self._rows = _uint(tileset, "tilecount") // self._columns
        if self._rows <= 0:
            raise EngineError("tileset has no rows")
        self._tile_size = SCREEN_HEIGHT / self._map_height

        bounds = self._tile_bounds(tileset)

        self.vbo.bind("array")
        self.program.bind()
        index = 0
        for element in root.findall("layer"):
            index = self._parse_layer(index, element, bounds)
        self.vbo.upload("static")

        self.vao.generate(self.program.attribute("inPosition"), 3, _FLOATS_PER_VERTEX, 0)
        self.vao.generate(self.program.attribute("inCoord"), 2, _FLOATS_PER_VERTEX, 3)
        self.program.set_uniform("gSampler", 0)
        self.mvp_location = self.program.uniform("MVP")
        self.projection = _ortho(0.0, SCREEN_WIDTH, SCREEN_HEIGHT, 0.0)
        self.update_mvp()

        log("Loaded: ", quote_str(self.name))

    @property
    def width(self) -> float:
        """Map width in screen units."""
        return self._map_width * self._tile_size

    @width.setter
    def width(self, value: float) -> None:
        if value:
            raise AttributeError("a level's width follows its map")

    @property
    def height(self) -> float:
        """Map height in screen units."""
        return self._map_height * self._tile_size

    @height.setter
    def height(self, value: float) -> None:
        if value:
            raise AttributeError("a level's height follows its map")

    @property
    def tile_size(self) -> float:
        return self._tile_size

    @property
    def layers(self) -> dict[str, TileLayer]:
        """The layers in name order."""
        return {name: self._layers[name] for name in sorted(self._layers)}

    @property
    def texture(self) -> Texture:
        return self._tileset

    def collision(self, rect: CollisionRect, direction: CollisionDirection) -> bool:
        """True when ``rect`` hits a solid tile on the side it moves towards.

        A tile index outside the map counts as a hit.
        """
        if self._tile_size <= 0:
            raise EngineError("level has no tile size")
        size = self._tile_size
        x1 = int((rect.x - self.x) / size)
        x2 = int((rect.right - self.x) / size)
        y1 = int((rect.y - self.y) / size)
        y2 = int((rect.bottom - self.y) / size)

        for name in sorted(self._layers):
            tiles = self._layers[name].tiles
            if direction in (CollisionDirection.UP, CollisionDirection.DOWN):
                row = y1 if direction is CollisionDirection.UP else y2
                ids = [x + self._map_width * row for x in range(x1, x2 + 1)]
            else:
                column = x1 if direction is CollisionDirection.LEFT else x2
                ids = [column + self._map_width * y for y in range(y1, y2 + 1)]
            for tile_id in ids:
                if not 0 <= tile_id < len(tiles):
                    log_error("Collision index (", tile_id, ") out of bounds")
                    return True
                tile = tiles[tile_id]
                if tile.collidable and tile.rect.shift(self.x, self.y).intersects(rect):
                    return True
        return False

    def update_visibility(self, screen_width: float = SCREEN_WIDTH) -> dict[str, list[int]]:
        """Mark which tiles are on screen; return their vertex indices per layer."""
        size = self._tile_size
        visible: dict[str, list[int]] = {}
        for name in sorted(self._layers):
            indices: list[int] = []
            for tile in self._layers[name].tiles:
                x = tile.map_x
                off = (x + 1) * size + self.x < 0 or (x - 1) * size + self.x + size > screen_width
                tile.on_screen = not off
                if tile.on_screen:
                    indices.extend(range(tile.index_shift, tile.index_shift + VERTICES_PER_TILE))
            visible[name] = indices
        return visible

    def update_mvp(self) -> None:
        """Move the view to the level's position and refresh the transforms."""
        self.view = _translate(self.x, self.y, self.z)
        super().update_mvp()

    def render(self, surface: pygame.Surface | None = None) -> None:
        """Draw the tiles that are on screen onto ``surface``, if one is given."""
        super().render(surface)
        self.program.bind()
        self._tileset.bind()
        self.vao.bind()
        self.update_visibility()
        if surface is not None:
            self._draw(surface)
        self.vao.unbind()
        self._tileset.unbind()
        self.program.unbind()

    def _draw(self, surface: pygame.Surface) -> None:
        size = self._tile_size
        for name in sorted(self._layers):
            for tile in self._layers[name].tiles:
                if not tile.on_screen:
                    continue
                cell = self._cell(tile.tile_id)
                if cell is not None:
                    surface.blit(cell, (round(tile.map_x * size + self.x), round(tile.map_y * size + self.y)))

    def _cell(self, tile_id: int) -> pygame.Surface | None:
        if tile_id in self._cells:
            return self._cells[tile_id]
        sheet = self._tileset.surface
        cell = None
        if sheet is not None:
            cell_width = sheet.get_width() // self._columns
            cell_height = sheet.get_height() // self._rows
            if cell_width and cell_height:
                column = tile_id % self._columns
                row = (tile_id // self._columns) % self._rows
                source = sheet.subsurface((column * cell_width, row * cell_height, cell_width, cell_height))
                side = max(1, math.ceil(self._tile_size))
                cell = pygame.transform.scale(source, (side, side))
        self._cells[tile_id] = cell
        return cell

    def _read_map(self) -> ET.Element:
        try:
            root = ET.parse(Path(self.name)).getroot()
        except (OSError, ET.ParseError) as exc:
            raise EngineError(f"cannot load game level {quote_str(self.name)}: {exc}") from exc
        if root.tag != "map":
            raise EngineError(f"{quote_str(self.name)} is not a tile map")
        return root

    def _tile_bounds(self, tileset: ET.Element) -> dict[int, CollisionRect]:
        bounds: dict[int, CollisionRect] = {}
        for tile in tileset.findall("tile"):
            tile_id = _uint(tile, "id")
            group = next(iter(tile), None)
            shape = None if group is None else next(iter(group), None)
            if shape is None:
                raise EngineError(f"tile {tile_id} has no collision shape")
            rect = CollisionRect(
                _float(shape, "x"), _float(shape, "y"), _float(shape, "width"), _float(shape, "height")
            )
            log(
                "Tile ", tile_id, ". Collision rect - x: ", rect.x, ", y: ", rect.y,
                ", width: ", rect.width, ", height: ", rect.height,
            )
            bounds[tile_id] = rect
        return bounds

    def _parse_layer(self, index: int, element: ET.Element, bounds: dict[int, CollisionRect]) -> int:
        step_u = 1.0 / self._columns
        step_v = 1.0 / self._rows
        z_order = self.z + len(self._layers) / 100.0

        name = element.get("name")
        if name is None:
            raise EngineError("map layer has no name")
        layer_width = _uint(element, "width")
        layer_height = _uint(element, "height")
        if layer_width <= 0 or layer_height <= 0:
            raise EngineError(f"map layer {quote_str(name)} has no size")
        layer = TileLayer(layer_width, layer_height)
        self._layers[name] = layer

        size = self._tile_size
        text = _child(element, "data").text or ""
        for count, gid in enumerate(_gids(text)):
            item = gid - 1
            if item < 0:
                raise EngineError(f"map layer {quote_str(name)} has an empty tile at {count}")
            x = count % layer_width
            y = (count // layer_width) % layer_height
            u = step_u * (item % self._columns)
            v = step_v * (self._rows - (item // self._columns) % self._rows)
            left, right = size * x, size * x + size
            top, bottom = size * y, size * y + size
            self.vbo.add_data((
                VertexUV((left, bottom, z_order), (u, v - step_v)),
                VertexUV((right, bottom, z_order), (u + step_u, v - step_v)),
                VertexUV((left, top, z_order), (u, v)),
                VertexUV((left, top, z_order), (u, v)),
                VertexUV((right, bottom, z_order), (u + step_u, v - step_v)),
                VertexUV((right, top, z_order), (u + step_u, v)),
            ))
            bound = bounds.get(item)
            if bound is not None:
                rect = CollisionRect(left + bound.x, top + bound.y, bound.width, bound.height)
            else:
                rect = CollisionRect(left, top, size, size)
            layer.tiles.append(Tile(item, x, y, rect, bound is not None, False, index))
            index += VERTICES_PER_TILE

        log("Map layer ", quote_str(name), " added. Width: ", layer_width, ", height: ", layer_height)
        return index
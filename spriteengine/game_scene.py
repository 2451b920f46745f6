"""The game scene: background, sun, bird, hero and a scrolling level."""

from __future__ import annotations

from collections.abc import Collection as KeySet
from enum import Enum

from .animation import Animation
from .collision import CollisionDirection
from .game_level import GameLevel
from .helpers import inc_fill
from .hero import Hero
from .log import log
from .program import new_program
from .resource_manager import instance
from .scene import Scene
from .sprite import Sprite
from .sprite_tile import SpriteTile
from .texture import Filter, Wrap

LEVEL_NAME = "level01.tmx"
SUN = "sceneObject:sun"
BIRD = "sceneObject:bird"
HERO = "sceneObject:iceman"
MOUNTAINS = "sceneObject:mountains"
SKY = "sky"

_DECELERATION = 20.0
_GRAVITY = 20.0
_BACKGROUND_PARALLAX = 5000.0


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    A = "a"
    D = "d"
    W = "w"
    S = "s"
    SPACE = "space"
    G = "g"
    ESCAPE = "escape"


class GameScene(Scene):
    """The playable scene; input arrives as the set of keys held down."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(width, height)
        self.should_close = False
        self.gravity = True
        self.background_shift = 0.0

        self.initialize_resources()
        manager = instance()

        sky = Sprite(False, new_program("basic.vs", "basic.fs", manager), manager.get_texture("sky_01.png"))
        self.add(SKY, sky)
        sky.place(0, 0, -1.0, self.width, self.height)

        self.mountains = Sprite(
            False, new_program("basic.vs", "basic.fs", manager), manager.get_texture("bg2.png")
        )
        self.mountains.program.set_uniform("alpha", 0.5)
        self.mountains.place(0, 150, -0.8, self.width, self.height - 150)
        self.mountains.texture.set_filtering(Filter.LINEAR_MIPMAP_LINEAR, Wrap.REPEAT)
        self.add(MOUNTAINS, self.mountains)

        sun = Sprite(True, new_program("basic.vs", "basic.fs", manager), manager.get_texture("sun_01.png"))
        sun.program.set_uniform("alpha", 0.5)
        self.add(SUN, sun)
        sun.place(600, 50, -0.9, 200, 200)

        self.hero = Hero(manager)
        self.add(HERO, self.hero)

        bird = SpriteTile(
            True, new_program("spriteTile.vs", "basic.fs", manager), manager.get_texture("bird.png"), 14, 14
        )
        bird.program.set_uniform("alpha", 0.2)
        self.add(BIRD, bird)
        bird.place(50, 100, -0.8, 50, 50)
        bird.add_animation(Animation("animation:bird:movement", inc_fill(14), 0.1), True)

        self.level = GameLevel(new_program("basic.vs", "basic.fs", manager), LEVEL_NAME, manager)
        self.level.program.set_uniform("alpha", 0.5)
        self.add("sceneObject:gameLevel:" + self.level.name, self.level)

    def initialize_resources(self) -> None:
        """Load the shaders and textures the scene draws with."""
        super().initialize_resources()
        manager = instance()
        for shader in ("basic.vs", "basic.fs", "spriteTile.vs"):
            manager.add_shader(shader)
        for texture in ("bg2.png", "sky_01.png", "sun_01.png", "bird.png"):
            manager.add_texture(texture)

    def handle_input(self, pressed: KeySet[Key]) -> None:
        """React to the keys held down this frame."""
        if Key.LEFT in pressed or Key.A in pressed:
            self.hero.set_mirrored(True)
            self.hero.inc_horizontal_speed(-1.0)
        if Key.RIGHT in pressed or Key.D in pressed:
            self.hero.set_mirrored(False)
            self.hero.inc_horizontal_speed(1.0)
        if (Key.UP in pressed or Key.W in pressed or Key.SPACE in pressed) and not self.hero.in_jump:
            self.hero.jump()
        if (Key.DOWN in pressed or Key.S in pressed) and not self.gravity:
            self.hero.inc_vertical_speed(5.0)
        if Key.G in pressed:
            self.gravity = not self.gravity
        if Key.ESCAPE in pressed:
            self.should_close = True

    def update(self, elapsed: float, pressed: KeySet[Key] = frozenset()) -> None:
        """Advance the scene by ``elapsed`` seconds."""
        self.handle_input(pressed)

        self.hero.update_stats()
        self.hero.do_animation(elapsed)

        self.get(SUN).rotate(elapsed)

        bird = self.get(BIRD)
        if bird.x > self.width - bird.width / 2 and not bird.mirrored:
            bird.set_mirrored(True)
        if bird.x < bird.width / 2 and bird.mirrored:
            bird.set_mirrored(False)
        bird.move(-1.0 if bird.mirrored else 1.0, 0)
        bird.do_animation(elapsed)
        bird.program.unbind()

        self.move_hero(elapsed)

    def move_hero(self, elapsed: float) -> None:
        """Move the hero by its speed, colliding with the level and scrolling it."""
        hero, level = self.hero, self.level
        shift_x, shift_y = hero.speed
        hero_rect = hero.collision_rect

        if hero_rect.x <= 0.0 and level.x >= 0.0 and shift_x < 0.0:
            shift_x = 0.0
        if hero_rect.right > self.width and level.x + level.width <= self.width and shift_x > 0.0:
            shift_x = 0.0

        rect = hero_rect.shift(shift_x, 0)
        horizontal = CollisionDirection.RIGHT if shift_x > 0 else CollisionDirection.LEFT
        if level.collision(rect, horizontal):
            shift_x = 0.0

        rect = hero_rect.shift(0, shift_y)
        vertical = CollisionDirection.DOWN if shift_y > 0 else CollisionDirection.UP
        if level.collision(rect, vertical) or rect.y <= 0:
            if shift_y > 0:
                hero.jump(False)
            shift_y = 0.0
        if rect.bottom >= self.height:
            log("You lose.")
            if shift_y > 0:
                hero.jump(False)
            shift_y = 0.0

        half = self.width / 2
        if hero_rect.x < half and shift_x < 0.0 and level.x < 0.0:
            self.scroll_map(-shift_x)
            hero.move(0, shift_y)
        elif hero_rect.right > half and shift_x > 0.0 and level.x + level.width > self.width:
            self.scroll_map(-shift_x)
            hero.move(0, shift_y)
        else:
            hero.move(shift_x, shift_y)

        if shift_x != 0.0:
            n = -1.0 if shift_x > 0.0 else 1.0
            shift_x += elapsed * _DECELERATION * n
            if (n < 0.0 and shift_x < 0.0) or (n > 0.0 and shift_x > 0.0):
                shift_x = 0.0

        shift_y = shift_y + elapsed * _GRAVITY if self.gravity else 0.0
        hero.set_speed((shift_x, shift_y))

    def scroll_map(self, shift_x: float) -> None:
        """Move the level sideways and slide the mountains a little."""
        self.level.move(shift_x, 0)
        self.background_shift -= shift_x / _BACKGROUND_PARALLAX
        self.mountains.program.set_uniform("shiftX", self.background_shift)
        self.mountains.program.unbind()
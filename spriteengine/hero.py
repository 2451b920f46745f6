"""The player character: an animated sprite sheet that moves and jumps."""

from __future__ import annotations

from .animation import Animation
from .movement import Movement
from .program import new_program
from .resource_manager import ResourceManager, instance
from .sprite_tile import SpriteTile

HERO_MOVEMENT = "animation:hero:movement"
HERO_TEXTURE = "iceman.png"
JUMP_IMPULSE = -10.0


class Hero(SpriteTile, Movement):
    """The hero sprite with a speed, a jump state and a walking animation."""

    def __init__(self, manager: ResourceManager | None = None) -> None:
        if manager is None:
            manager = instance()
        program = new_program("spriteTile.vs", "basic.fs", manager)
        texture = manager.add_texture(HERO_TEXTURE)
        SpriteTile.__init__(self, False, program, texture, 5, 5)
        Movement.__init__(self)
        self._jumping = False

        self.program.set_uniform("alpha", 0.2)
        self.place(50, 310, 0.5, 40, 69)
        self.add_animation(Animation(HERO_MOVEMENT, [0, 1, 2, 3, 4], 0.05))

    @property
    def in_jump(self) -> bool:
        """True while the hero is in the air after a jump."""
        return self._jumping

    def jump(self, jumping: bool = True) -> None:
        """Set the jump state and push the hero upwards."""
        self._jumping = jumping
        self.inc_vertical_speed(JUMP_IMPULSE)

    def update_stats(self) -> None:
        """Play the walking animation while moving, stop it when standing."""
        if not self.is_moving():
            if self.current_animation is not None:
                self.stop_animation()
        else:
            current = self.current_animation
            if current is None or current.name != HERO_MOVEMENT:
                self.set_current_animation(HERO_MOVEMENT)
"""Objects placed in a scene with position, size, rotation and transforms."""

from __future__ import annotations

import math

import numpy as np

from .buffers import QUAD_CENTRED_UV, QUAD_UV, VertexArray, VertexBuffer
from .collision import CollisionRect
from .program import NO_LOCATION, ShaderProgram
from .resource import ResourceType

SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0
_FLOATS_PER_VERTEX = 5


def _identity() -> np.ndarray:
    return np.identity(4, dtype=np.float32)


def _ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    m = _identity()
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -1.0
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    return m


def _translate(x: float, y: float, z: float) -> np.ndarray:
    m = _identity()
    m[:3, 3] = (x, y, z)
    return m


def _scale(x: float, y: float, z: float) -> np.ndarray:
    m = _identity()
    m[0, 0], m[1, 1], m[2, 2] = x, y, z
    return m


def _rotate_z(angle: float) -> np.ndarray:
    m = _identity()
    c, s = math.cos(angle), math.sin(angle)
    m[0, 0], m[0, 1], m[1, 0], m[1, 1] = c, -s, s, c
    return m


class SceneObject:
    """Something with a place in the scene, drawn through a shader program."""

    def __init__(self, program: ShaderProgram) -> None:
        if not isinstance(program, ShaderProgram) or program.kind is not ResourceType.SHADER_PROGRAM:
            raise TypeError("a scene object needs a shader program")
        self.program = program
        self.x = self.y = self.z = 0.0
        self.width = self.height = 0.0
        self.angle = 0.0
        self.mirrored = False
        self.mvp_location = NO_LOCATION
        self.model = _identity()
        self.view = _identity()
        self.projection = _identity()
        self.mvp_updated = False
        self.vao = VertexArray()
        self.vbo = VertexBuffer()

    def __bool__(self) -> bool:
        return True

    @property
    def texture(self):
        """The texture drawn by this object; a plain object has none."""
        return None

    @property
    def collision_rect(self) -> CollisionRect:
        return CollisionRect(self.x, self.y, self.width, self.height)

    def move(self, dx: float, dy: float, dz: float = 0.0) -> None:
        self.move_to(self.x + dx, self.y + dy, self.z + dz)

    def move_to(self, x: float, y: float, z: float = 0.0) -> None:
        """Place the object at ``x``, ``y``, ``z``; ``z`` defaults to zero."""
        self.x, self.y, self.z = x, y, z
        self.mvp_updated = False

    def rotate(self, angle: float) -> None:
        """Turn by ``angle`` radians."""
        self.angle += angle
        self.mvp_updated = False

    def reset_rotation(self) -> None:
        self.angle = 0.0

    def set_size(self, width: float, height: float) -> None:
        """Resize; a plain scene object keeps its size."""

    def place(self, x: float, y: float, z: float, width: float, height: float) -> None:
        """Move and resize; a plain scene object stays as it is."""

    def resize(self, delta_width: float, delta_height: float) -> None:
        """Grow or shrink; a plain scene object keeps its size."""

    def set_mirrored(self, mirrored: bool) -> None:
        """Mirror horizontally; a plain scene object ignores this."""

    def animate(self) -> None:
        """Step to the next picture; a plain scene object has none."""

    def update_stats(self) -> None:
        """Refresh per-frame state; nothing to do for a plain scene object."""

    def update_mvp(self) -> None:
        """Combine the transforms and hand them to the program."""
        mvp = self.projection @ self.view @ self.model
        self.program.set_uniform(self.mvp_location, mvp)
        self.mvp_updated = True

    def render(self, surface=None) -> None:
        """Prepare for drawing, updating the transforms when they changed."""
        self._bind()
        if not self.mvp_updated:
            self.update_mvp()

    def _bind(self) -> None:
        self.program.bind()
        self.vao.bind()

    def _unbind(self) -> None:
        self.vao.unbind()
        self.program.unbind()


class QuadObject(SceneObject):
    """A textured quad, either centred on its position or hanging from it."""

    def __init__(self, centered: bool, program: ShaderProgram) -> None:
        super().__init__(program)
        self.centered = centered
        self.vbo.bind("array")
        self.program.bind()
        self.vbo.add_data(QUAD_CENTRED_UV if centered else QUAD_UV)
        self.vbo.upload("static")
        self.vao.generate(self.program.attribute("inPosition"), 3, _FLOATS_PER_VERTEX, 0)
        self.vao.generate(self.program.attribute("inCoord"), 2, _FLOATS_PER_VERTEX, 3)
        self.program.set_uniform("gSampler", 0)
        self.mvp_location = self.program.uniform("MVP")

    def set_size(self, width: float, height: float) -> None:
        if width == 0 or height == 0:
            raise ValueError("width and height must not be zero")
        self.width, self.height = width, height
        self.mvp_updated = False

    def place(self, x: float, y: float, z: float, width: float, height: float) -> None:
        self.move_to(x, y, z)
        self.set_size(width, height)

    def resize(self, delta_width: float, delta_height: float) -> None:
        self.set_size(self.width + delta_width, self.height + delta_height)

    def update_mvp(self) -> None:
        """Rebuild the screen projection, position, size and rotation."""
        if self.mvp_location == NO_LOCATION:
            return
        self.projection = _ortho(0.0, SCREEN_WIDTH, SCREEN_HEIGHT, 0.0)
        self.view = _translate(self.x, self.y, self.z)
        self.model = _scale(self.width, self.height, 1.0) @ _rotate_z(self.angle)
        super().update_mvp()
"""Shader programs: a linked vertex and fragment shader pair."""

from __future__ import annotations

import itertools
import re
from typing import TYPE_CHECKING, Any

import numpy as np

from .log import log_error
from .resource import Resource, ResourceType
from .shader import Shader

if TYPE_CHECKING:
    from .resource_manager import ResourceManager

NO_LOCATION = -1

_DECLARATION = re.compile(
    r"^\s*(?:layout\s*\([^)]*\)\s*)?(in|attribute|uniform)\s+([^;]+);", re.MULTILINE
)
_LINE_COMMENT = re.compile(r"//[^\n]*")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_IDENTIFIER = re.compile(r"[A-Za-z_]\w*")

_counter = itertools.count()
_ids = itertools.count(1)
_current: "ShaderProgram | None" = None


def _declared(source: str | None, qualifiers: set[str]) -> list[str]:
    """Names declared in ``source`` with one of ``qualifiers``, in order."""
    if not source:
        return []
    text = _BLOCK_COMMENT.sub("", _LINE_COMMENT.sub("", source))
    names: list[str] = []
    for qualifier, declaration in _DECLARATION.findall(text):
        if qualifier not in qualifiers:
            continue
        first, *rest = declaration.split(",")
        head = _IDENTIFIER.findall(first.split("[")[0])
        found = head[-1:] + [
            words[0] for words in (_IDENTIFIER.findall(part.split("[")[0]) for part in rest) if words
        ]
        names.extend(name for name in found if name not in names)
    return names


class ShaderProgram(Resource):
    """Links two shaders and keeps their attribute and uniform tables.

    Uniform values are remembered by name, so the rest of the engine can
    read back what it set when drawing.
    """

    def __init__(self, vertex_shader: Shader, fragment_shader: Shader) -> None:
        super().__init__(ResourceType.SHADER_PROGRAM, f"shaderProgram:{next(_counter)}", next(_ids))
        self._attributes: dict[str, int] = {}
        self._uniforms: dict[str, int] = {}
        self._values: dict[str, Any] = {}
        self._vertex = vertex_shader
        self._fragment = fragment_shader
        self._link()

    @property
    def vertex_shader(self) -> Shader:
        return self._vertex

    @property
    def fragment_shader(self) -> Shader:
        return self._fragment

    def set_shaders(self, vertex_shader: Shader, fragment_shader: Shader) -> None:
        """Replace both shaders and link again."""
        self._vertex = vertex_shader
        self._fragment = fragment_shader
        self._link()

    def set_shaders_by_name(
        self, vertex_name: str, fragment_name: str, manager: "ResourceManager"
    ) -> None:
        """Replace both shaders with ones held by ``manager``."""
        if not vertex_name or not fragment_name:
            raise ValueError("shader names must not be empty")
        self.set_shaders(manager.get_shader(vertex_name), manager.get_shader(fragment_name))

    def attribute(self, name: str) -> int:
        """Location of a vertex attribute, or ``NO_LOCATION``."""
        if not name:
            raise ValueError("attribute name must not be empty")
        return self._attributes.setdefault(name, NO_LOCATION)

    def uniform(self, name: str) -> int:
        """Location of a uniform, or ``NO_LOCATION``."""
        if not name:
            raise ValueError("uniform name must not be empty")
        return self._uniforms.setdefault(name, NO_LOCATION)

    def set_uniform(self, name: str | int, value: Any) -> None:
        """Bind the program and set a uniform by name or by location.

        A location of ``NO_LOCATION`` or one no uniform holds is ignored.
        """
        self.bind()
        if isinstance(name, str):
            self.uniform(name)
            key: str | None = name
        else:
            key = self._name_at(name)
        if key is None:
            return
        if isinstance(value, np.ndarray):
            value = np.array(value, dtype=np.float32)
        self._values[key] = value

    def get_uniform(self, name: str) -> Any:
        """The value last set for ``name``, or None."""
        value = self._values.get(name)
        return value.copy() if isinstance(value, np.ndarray) else value

    def bind(self) -> None:
        """Make this the program in use."""
        global _current
        if not self.in_use():
            _current = self

    def unbind(self) -> None:
        """Leave no program in use."""
        global _current
        _current = None

    def in_use(self) -> bool:
        return _current is self

    def _name_at(self, location: int) -> str | None:
        if location == NO_LOCATION:
            return None
        return next((name for name, loc in self._uniforms.items() if loc == location), None)

    def _link(self) -> None:
        self._attributes.clear()
        self._uniforms.clear()
        self._values.clear()
        if self._vertex is None or self._fragment is None:
            raise ValueError("a program needs both a vertex and a fragment shader")
        missing = [s.name for s in (self._vertex, self._fragment) if s.source is None]
        if missing:
            log_error("LNK shader program: ", "no source for ", ", ".join(missing))
        for location, name in enumerate(_declared(self._vertex.source, {"in", "attribute"})):
            self._attributes[name] = location
        uniforms = _declared(self._vertex.source, {"uniform"})
        uniforms += [
            name for name in _declared(self._fragment.source, {"uniform"}) if name not in uniforms
        ]
        for location, name in enumerate(uniforms):
            self._uniforms[name] = location


def new_program(
    vertex_name: str, fragment_name: str, manager: "ResourceManager | None" = None
) -> ShaderProgram:
    """Build a program from two shaders held by ``manager`` (the shared one by default)."""
    if manager is None:
        from .resource_manager import instance

        manager = instance()
    return ShaderProgram(manager.get_shader(vertex_name), manager.get_shader(fragment_name))
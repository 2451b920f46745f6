"""Base class for named engine resources."""

from __future__ import annotations

from enum import Enum


class ResourceType(Enum):
    SHADER = 0
    SHADER_PROGRAM = 1
    TEXTURE = 2
    VBO = 3
    VAO = 4
    GAME_LEVEL = 5
    ANIMATION = 6


_DIRECTORIES = {
    ResourceType.SHADER: "Data/Shaders/",
    ResourceType.TEXTURE: "Data/Textures/",
    ResourceType.GAME_LEVEL: "Data/Maps/",
}


class Resource:
    """A named resource; file-backed kinds get their data directory prefixed."""

    def __init__(self, kind: ResourceType, name: str, resource_id: int = 0) -> None:
        if not name:
            raise ValueError("resource name must not be empty")
        self._kind = kind
        self._name = _DIRECTORIES.get(kind, "") + name
        self.resource_id = resource_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> ResourceType:
        return self._kind

    def bind(self) -> None:
        """Make the resource current; nothing to do for a plain resource."""

    def unbind(self) -> None:
        """Release the resource; nothing to do for a plain resource."""
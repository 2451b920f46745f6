"""The shared store of loaded shaders and textures."""

from __future__ import annotations

from .collection import Collection
from .helpers import quote_str
from .log import log
from .resource import Resource
from .shader import Shader
from .texture import Texture


class ResourceManager(Collection[Resource]):
    """Resources keyed by the file name they were added under."""

    def get_resource(self, name: str) -> Resource | None:
        """Return the resource added as ``name``, or None."""
        if not name:
            raise ValueError("resource name must not be empty")
        return self.get(name)

    def get_texture(self, name: str) -> Texture:
        """Return the texture added as ``name``."""
        return self._get_typed(name, Texture)

    def get_shader(self, name: str) -> Shader:
        """Return the shader added as ``name``."""
        return self._get_typed(name, Shader)

    def add_texture(self, name: str) -> Texture:
        """Load the texture ``name`` unless it is already present."""
        existing = self.get_resource(name)
        if isinstance(existing, Texture):
            log("WARNING! Texture ", quote_str(name), " already exists")
            return existing
        texture = Texture(name)
        self.add(name, texture)
        return texture

    def add_shader(self, name: str) -> Shader:
        """Load the shader ``name`` unless it is already present."""
        existing = self.get_resource(name)
        if isinstance(existing, Shader):
            log("WARNING! Shader ", quote_str(name), " already exists")
            return existing
        shader = Shader(name)
        self.add(name, shader)
        return shader

    def _get_typed(self, name: str, kind: type):
        resource = self.get_resource(name)
        if resource is None:
            raise KeyError(f"no resource named {quote_str(name)}")
        if not isinstance(resource, kind):
            raise TypeError(f"resource {quote_str(name)} is not a {kind.__name__}")
        return resource


_instance: ResourceManager | None = None


def instance() -> ResourceManager:
    """Return the process-wide manager, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = ResourceManager()
    return _instance


def destroy_instance() -> None:
    """Drop the process-wide manager and everything it holds."""
    global _instance
    if _instance is not None:
        _instance.clear()
        _instance = None
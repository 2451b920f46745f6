"""A scene: the named objects drawn together each frame."""

from __future__ import annotations

from .collection import Collection
from .resource_manager import destroy_instance
from .scene_object import SceneObject


class Scene(Collection[SceneObject]):
    """Scene objects drawn in name order on a ``width`` by ``height`` screen."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__()
        self.width = float(width)
        self.height = float(height)
        # Only the base hook runs here; subclasses load their own resources.
        Scene.initialize_resources(self)

    def initialize_resources(self) -> None:
        """Load the resources the scene needs; a bare scene needs none."""

    def render(self, surface=None) -> None:
        """Render every object in name order."""
        for item in self.items().values():
            item.render(surface)

    def close(self) -> None:
        """Release the shared resources and drop every object."""
        destroy_instance()
        self.clear()

    def __enter__(self) -> "Scene":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
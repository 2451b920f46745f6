"""Vertex data buffers and vertex attribute layouts."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .resource import Resource, ResourceType

_ids = itertools.count(1)


@dataclass(frozen=True)
class VertexUV:
    """A vertex position with its texture coordinate."""

    coord: tuple[float, float, float]
    uv: tuple[float, float]

    def as_row(self) -> tuple[float, ...]:
        return (*self.coord, *self.uv)


QUAD_CENTRED_UV = (
    VertexUV((-1.0, 1.0, 0.0), (0.0, 0.0)),
    VertexUV((1.0, 1.0, 0.0), (1.0, 0.0)),
    VertexUV((-1.0, -1.0, 0.0), (0.0, 1.0)),
    VertexUV((1.0, -1.0, 0.0), (1.0, 1.0)),
)

QUAD_UV = (
    VertexUV((0.0, 1.0, 0.0), (0.0, 0.0)),
    VertexUV((1.0, 1.0, 0.0), (1.0, 0.0)),
    VertexUV((0.0, 0.0, 0.0), (0.0, 1.0)),
    VertexUV((1.0, 0.0, 0.0), (1.0, 1.0)),
)


class VertexBuffer(Resource):
    """Collects vertices and freezes them into a float32 array on upload."""

    def __init__(self, size: int = 0) -> None:
        super().__init__(ResourceType.VBO, "VertexBufferObject", next(_ids))
        self.size = size
        self.buffer_type = None
        self.drawing_hint = None
        self._pending: list[VertexUV] = []
        self._uploaded: np.ndarray | None = None

    def bind(self, buffer_type=None) -> None:
        """Select the buffer target later uploads go to."""
        self.buffer_type = buffer_type

    def unbind(self) -> None:
        """Release the buffer target."""
        self.buffer_type = None

    def add_data(self, vertices: Iterable[VertexUV]) -> None:
        """Queue vertices for the next upload."""
        batch = list(vertices)
        if not batch:
            raise ValueError("no vertex data to add")
        self._pending.extend(batch)

    def upload(self, drawing_hint=None) -> None:
        """Pack the queued vertices into the uploaded array and clear the queue."""
        rows = [vertex.as_row() for vertex in self._pending]
        self._uploaded = np.array(rows, dtype=np.float32).reshape(len(rows), 5)
        self.drawing_hint = drawing_hint
        self._pending.clear()

    def uploaded_vertices(self) -> np.ndarray | None:
        """Return a copy of the uploaded data, one row per vertex, or None."""
        return None if self._uploaded is None else self._uploaded.copy()

    def pending_vertices(self) -> tuple[VertexUV, ...]:
        """Return the vertices queued since the last upload."""
        return tuple(self._pending)


@dataclass(frozen=True)
class AttributeLayout:
    size: int
    stride: int
    offset: int


class VertexArray(Resource):
    """Records how vertex attributes are laid out in a buffer."""

    def __init__(self) -> None:
        super().__init__(ResourceType.VAO, "VertexArrayBuffer", next(_ids))
        self.layouts: dict[object, AttributeLayout] = {}
        self.bound = False
        self.bind()

    def bind(self) -> None:
        self.bound = True

    def unbind(self) -> None:
        self.bound = False

    def generate(self, attribute, size: int, stride: int, offset: int = 0) -> None:
        """Enable ``attribute`` with ``size`` components every ``stride`` units."""
        if size <= 0:
            raise ValueError("attribute size must be positive")
        if stride <= 0:
            raise ValueError("attribute stride must be positive")
        self.layouts[attribute] = AttributeLayout(size, stride, offset)
"""Shader source files loaded from the shader data directory."""

from __future__ import annotations

import itertools
from enum import Enum
from pathlib import Path

from .errors import EngineError
from .helpers import quote_str
from .log import log, log_error
from .resource import Resource, ResourceType

SHADER_VERSION = "#version 330\n"

_ids = itertools.count(1)


class ShaderStage(Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


class Shader(Resource):
    """A shader whose stage is chosen by its file extension.

    A file that cannot be read is logged and leaves ``source`` as None.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(ResourceType.SHADER, filename)
        self.stage = ShaderStage.VERTEX if self.name.endswith(".vs") else ShaderStage.FRAGMENT
        self.source: str | None = None
        try:
            self._load()
        except EngineError as exc:
            log_error("Failed to load shader file: ", quote_str(str(exc)))

    @property
    def loaded(self) -> bool:
        return self.source is not None

    def _load(self) -> None:
        try:
            text = Path(self.name).read_text(encoding="utf-8")
        except OSError as exc:
            raise EngineError(self.name) from exc
        self.source = SHADER_VERSION + text
        self.resource_id = next(_ids)
        log("Shader loaded: ", quote_str(self.name))
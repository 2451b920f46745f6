"""Engine exception type."""

from __future__ import annotations


class EngineError(Exception):
    """Raised when the engine cannot carry on with an operation."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
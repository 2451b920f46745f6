"""Named logs: a file log, a console log and one that writes to both."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .errors import EngineError
from .helpers import quote_str

EOL = "\n"
DELIMITER = "-" * 52 + "\n"
DEFAULT_ERROR_LOG = "seError.log"

ERROR_LOG = "ErrorLog"
DEBUG_LOG = "DebugLog"
OMNI_LOG = "OmniLogger"

_RULE = "*" + "-" * 69
_BEGIN = "*                            Log begin                               *"
_END = "*                             Log end                                *"


class Log(ABC):
    """A destination for log text."""

    def write(self, *args: object) -> "Log":
        """Write the text form of every argument, joined without separators."""
        self._emit("".join(str(arg) for arg in args))
        return self

    @abstractmethod
    def _emit(self, message: str) -> None:
        """Deliver one message."""


class FileLog(Log):
    """A log written to a file, framed by begin and end banners."""

    def __init__(self, path) -> None:
        self.path = path
        try:
            self._file = open(path, "w", encoding="utf-8")
        except OSError as exc:
            raise EngineError(
                "Log file could not be opened! Filename: " + quote_str(str(path))
            ) from exc
        self._file.write(f"{_RULE}{EOL}{_BEGIN}{EOL}{_RULE}{EOL}")

    def write(self, *args: object) -> "FileLog":
        """Append to the file, flushing once a line is complete."""
        super().write(*args)
        return self

    def _emit(self, message: str) -> None:
        self._file.write(message)
        if message.endswith(EOL):
            self._file.flush()

    def close(self) -> None:
        """Write the end banner and close the file."""
        if self._file.closed:
            return
        self._file.write(f"{_RULE}{EOL}{_END}{EOL}{_RULE}{EOL}")
        self._file.close()


class ConsoleLog(Log):
    """A log written to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, *args: object) -> "ConsoleLog":
        """Write to the stream."""
        super().write(*args)
        return self

    def _emit(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(message)


class OmniLog(Log):
    """A log that forwards each message to the debug and the error log."""

    def __init__(self, registry: "LogRegistry") -> None:
        self._registry = registry

    def write(self, *args: object) -> "OmniLog":
        """Write to both the debug and the error log."""
        super().write(*args)
        return self

    def _emit(self, message: str) -> None:
        self._registry.debug().write(message)
        self._registry.error().write(message)


class LogRegistry:
    """Holds the named logs and whether logging is switched on."""

    def __init__(self) -> None:
        self._logs: dict[str, Log] = {}
        self.enabled = False

    def initialize(self, error_log_path=DEFAULT_ERROR_LOG) -> None:
        """Create the standard error, debug and omni logs and enable logging."""
        self.add(ERROR_LOG, FileLog(error_log_path))
        self.add(DEBUG_LOG, ConsoleLog())
        self.add(OMNI_LOG, OmniLog(self))
        self.enabled = True

    def add(self, name: str, log: Log) -> None:
        """Register ``log`` under ``name``; an existing entry is kept."""
        if log is None:
            raise ValueError("log must not be None")
        self._logs.setdefault(name, log)

    def get(self, name: str) -> Log:
        """Return the log registered under ``name``."""
        try:
            return self._logs[name]
        except KeyError:
            raise KeyError(f"no log named {quote_str(name)}") from None

    def debug(self) -> Log:
        return self.get(DEBUG_LOG)

    def error(self) -> Log:
        return self.get(ERROR_LOG)

    def omni(self) -> Log:
        return self.get(OMNI_LOG)

    def destroy(self) -> None:
        """Close every file log and forget all logs."""
        for log in self._logs.values():
            if isinstance(log, FileLog):
                log.close()
        self._logs.clear()
        self.enabled = False


_registry = LogRegistry()


def initialize(error_log_path=DEFAULT_ERROR_LOG) -> None:
    """Set up the process-wide logs."""
    _registry.initialize(error_log_path)


def destroy() -> None:
    """Close the process-wide logs."""
    _registry.destroy()


def log(*args: object) -> None:
    """Write one line to the debug and error logs, if logging is on."""
    if _registry.enabled:
        _registry.omni().write(*args, EOL)


def log_error(*args: object) -> None:
    """Write one line prefixed with ``ERROR: ``, if logging is on."""
    if _registry.enabled:
        _registry.omni().write("ERROR: ", *args, EOL)
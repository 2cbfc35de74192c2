from __future__ import annotations

from pathlib import Path


class ExtractorError(Exception):
    """Base class for per-path extraction failures."""

    kind = "error"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class PathNotFoundError(ExtractorError):
    kind = "not_found"


class MalformedContainerError(ExtractorError):
    kind = "malformed"


class BridgeError(Exception):
    pass


class CommandRegistrationError(BridgeError):
    pass


class UnknownCommandError(BridgeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}")
        self.name = name


class CommandInvocationError(BridgeError):
    pass

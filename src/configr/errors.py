from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Base class for every failure of a config load."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class PathUnresolvableError(ConfigError):
    """The config location could not be computed."""


class DirectoryCreateError(ConfigError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Unable to create configuration directory {path}: {reason}", path=path)


class WriteError(ConfigError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Unable to create configuration file {path}: {reason}", path=path)


class SerializeError(ConfigError):
    """The blank instance has no TOML representation."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Unable to serialize blank configuration for {path}: {reason}", path=path)


class ReadError(ConfigError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Unable to read configuration file from {path}: {reason}", path=path)


class ParseError(ConfigError):
    """
    The file exists but its contents do not describe the configuration type.

    `details` is the decoder or validator diagnostic and `toml` the text that was read,
    so callers can show users what to fix.
    """

    def __init__(self, path: Path, details: str, toml: str) -> None:
        super().__init__(f"Unable to parse TOML\n{path}\n```\n{toml}```\n{details}", path=path)
        self.details = details
        self.toml = toml


__all__ = [
    "ConfigError",
    "DirectoryCreateError",
    "ParseError",
    "PathUnresolvableError",
    "ReadError",
    "SerializeError",
    "WriteError",
]

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from configr import codec
from configr.blank import blank_producer
from configr.errors import (
    DirectoryCreateError,
    ParseError,
    ReadError,
    SerializeError,
    WriteError,
)
from configr.models import ConfigLoadRequest
from configr.paths import DirectoryLike, resolve_config_path

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def ensure_config_dir(path: Path) -> None:
    """Create the parent directories of `path`. Already existing directories are fine."""
    directory = path.parent
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(directory, e) from e


def bootstrap_config_file(path: Path, blank_producer: Callable[[], BaseModel]) -> bool:
    """
    Write a blank config to `path` unless a file is already there.

    Returns True when a new file was written. The file is opened in exclusive-create mode,
    so a file that appears between the existence check and the write is kept as is.
    """
    if path.exists():
        return False

    try:
        text = codec.dumps(blank_producer())
    except (TypeError, ValueError) as e:
        raise SerializeError(path, e) from e

    try:
        handle = path.open("x", encoding="utf-8")
    except FileExistsError:
        logger.warning("Config file was created concurrently; keeping it. path=%s", path)
        return False
    except OSError as e:
        raise WriteError(path, e) from e

    try:
        with handle:
            handle.write(text)
    except OSError as e:
        path.unlink(missing_ok=True)
        raise WriteError(path, e) from e

    logger.info("Created config file. path=%s", path)
    return True


def read_config(path: Path, model: Type[ModelT]) -> ModelT:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e

    try:
        return codec.loads(text, model)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ParseError(path, str(e), text) from e


class TomlConfigLoader:
    """Resolves, bootstraps and reads `config.toml`. Holds no state between calls."""

    def load(self, model: Type[ModelT], request: ConfigLoadRequest) -> ModelT:
        path = resolve_config_path(request.app_name, request.directory)
        ensure_config_dir(path)
        bootstrap_config_file(path, blank_producer(model, use_defaults=request.populate_with_defaults))
        config = read_config(path, model)
        logger.debug("Loaded config. model=%s path=%s", model.__name__, path)
        return config


def load(model: Type[ModelT], app_name: str, populate_with_defaults: bool = False) -> ModelT:
    """Load `model` from the OS config directory, creating the file on first run."""
    request = ConfigLoadRequest(app_name=app_name, populate_with_defaults=populate_with_defaults)
    return TomlConfigLoader().load(model, request)


def load_with_dir(
    model: Type[ModelT],
    app_name: str,
    directory: DirectoryLike,
    populate_with_defaults: bool = False,
) -> ModelT:
    """Load `model` from `<directory>/<app-name>/config.toml`, creating the file on first run."""
    request = ConfigLoadRequest(
        app_name=app_name,
        directory=directory,
        populate_with_defaults=populate_with_defaults,
    )
    return TomlConfigLoader().load(model, request)


__all__ = [
    "TomlConfigLoader",
    "bootstrap_config_file",
    "ensure_config_dir",
    "load",
    "load_with_dir",
    "read_config",
]

"""
Config file location rules.

With no override the base directory is the per-user config directory of the OS:

- Linux: `$XDG_CONFIG_HOME` or `~/.config`
- Windows: `%APPDATA%` (roaming)
- macOS: `~/Library/Application Support`

The file itself always lives at `<base>/<app-slug>/config.toml`.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from platformdirs import user_config_dir

from configr.errors import PathUnresolvableError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.toml"

DirectoryLike = Union[str, "os.PathLike[str]"]

_WHITESPACE = re.compile(r"\s")
_UNEXPANDED_VAR = re.compile(r"\$(\{(?P<braced>[^}]*)\}|(?P<bare>\w+))")


def app_slug(app_name: str) -> str:
    """Return the directory name used for `app_name`, e.g. "Bot App" -> "bot-app"."""
    if not app_name or not app_name.strip():
        raise PathUnresolvableError(f"Application name must not be blank, got: {app_name!r}")
    return _WHITESPACE.sub("-", app_name).lower()


def expand_directory(directory: DirectoryLike) -> Path:
    raw = os.fspath(directory)
    expanded = os.path.expandvars(os.path.expanduser(raw))

    match = _UNEXPANDED_VAR.match(expanded)
    if match:
        name = match.group("braced") or match.group("bare")
        raise PathUnresolvableError(
            f"Environment variable '{name}' used in config directory {raw!r} is not set"
        )
    if expanded.startswith("~"):
        raise PathUnresolvableError(f"Unable to expand home directory in config directory {raw!r}")

    return Path(expanded).absolute()


def system_config_dir() -> Path:
    try:
        base = user_config_dir(roaming=True)
    except (OSError, KeyError) as e:
        raise PathUnresolvableError(f"Unable to get config directory from OS: {e}") from e

    if not base or not Path(base).is_absolute():
        raise PathUnresolvableError(f"Unable to get config directory from OS, got: {base!r}")
    return Path(base)


def resolve_config_path(app_name: str, directory: Optional[DirectoryLike] = None) -> Path:
    """
    Compute the absolute path of `config.toml` for `app_name`.

    An override `directory` replaces the OS lookup entirely; it may contain `~` and
    environment variable placeholders such as `$HOME`. An unset variable is an error only
    when it starts the directory; a `$` further along is kept as literal text.
    """
    slug = app_slug(app_name)
    base = expand_directory(directory) if directory is not None else system_config_dir()
    path = base / slug / CONFIG_FILE_NAME
    logger.debug("Resolved config path. app_name=%s path=%s", app_name, path)
    return path


__all__ = [
    "CONFIG_FILE_NAME",
    "DirectoryLike",
    "app_slug",
    "expand_directory",
    "resolve_config_path",
    "system_config_dir",
]

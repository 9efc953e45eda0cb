"""Bootstrap and load TOML configuration files from the per-user config directory."""

from configr.blank import blank_instance, default_instance, empty_instance
from configr.errors import (
    ConfigError,
    DirectoryCreateError,
    ParseError,
    PathUnresolvableError,
    ReadError,
    SerializeError,
    WriteError,
)
from configr.interfaces import BlankFactory, ConfigLoader
from configr.loader import TomlConfigLoader, load, load_with_dir
from configr.models import Config, ConfigLoadRequest
from configr.paths import CONFIG_FILE_NAME, app_slug, resolve_config_path

__all__ = [
    "BlankFactory",
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "ConfigLoadRequest",
    "ConfigLoader",
    "DirectoryCreateError",
    "ParseError",
    "PathUnresolvableError",
    "ReadError",
    "SerializeError",
    "TomlConfigLoader",
    "WriteError",
    "app_slug",
    "blank_instance",
    "default_instance",
    "empty_instance",
    "load",
    "load_with_dir",
    "resolve_config_path",
]

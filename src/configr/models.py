from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Type, TypeVar

from pydantic import BaseModel

from configr.blank import default_instance, empty_instance
from configr.paths import DirectoryLike, resolve_config_path

ConfigT = TypeVar("ConfigT", bound="Config")


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Inputs of a single config load.

    `directory` replaces the OS config directory when set. `populate_with_defaults` picks
    what a newly created file is filled with: declared defaults, or empty values.
    """

    app_name: str
    directory: Optional[DirectoryLike] = None
    populate_with_defaults: bool = False


class Config(BaseModel):
    """
    Base class for configuration types stored as `<config dir>/<app-name>/config.toml`.

    ```python
    class BotConfig(Config):
        bot_username: str
        client_id: str
        channel: str = "general"

    config = BotConfig.load("bot app")
    ```

    Subclasses may override `empty` and `default` to control what a first run writes.
    Do not name fields `empty`, `default`, `blank`, `load`, `load_with_dir` or
    `config_path`: they would shadow these classmethods and pydantic warns about it.
    """

    @classmethod
    def empty(cls: Type[ConfigT]) -> ConfigT:
        return empty_instance(cls)

    @classmethod
    def default(cls: Type[ConfigT]) -> ConfigT:
        return default_instance(cls)

    @classmethod
    def blank(cls: Type[ConfigT], use_defaults: bool) -> ConfigT:
        return cls.default() if use_defaults else cls.empty()

    @classmethod
    def config_path(cls, app_name: str, directory: Optional[DirectoryLike] = None) -> Path:
        return resolve_config_path(app_name, directory)

    @classmethod
    def load(cls: Type[ConfigT], app_name: str, populate_with_defaults: bool = False) -> ConfigT:
        """
        Load the config from the OS config directory, creating it on first run.

        This should be preferred over `load_with_dir` unless the host has no usable
        config directory.
        """
        from configr.loader import TomlConfigLoader

        request = ConfigLoadRequest(app_name=app_name, populate_with_defaults=populate_with_defaults)
        return TomlConfigLoader().load(cls, request)

    @classmethod
    def load_with_dir(
        cls: Type[ConfigT],
        app_name: str,
        directory: DirectoryLike,
        populate_with_defaults: bool = False,
    ) -> ConfigT:
        """Load the config from `<directory>/<app-name>/config.toml`. `directory` may use `$HOME` or `~`."""
        from configr.loader import TomlConfigLoader

        request = ConfigLoadRequest(
            app_name=app_name,
            directory=directory,
            populate_with_defaults=populate_with_defaults,
        )
        return TomlConfigLoader().load(cls, request)


__all__ = ["Config", "ConfigLoadRequest"]

from __future__ import annotations

import argparse
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from configr import Config, ConfigError


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"

    @classmethod
    def empty(cls) -> "LoggingSettings":
        # An empty level is not a valid logging level.
        return cls()


class BotConfig(Config):
    model_config = ConfigDict(frozen=True, extra="forbid")

    bot_username: str
    client_id: str
    client_secret: str
    channel: str = "general"
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bot-app", description="Load the bot app config")
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Base directory for bot-app/config.toml (default: the OS config directory)",
    )
    parser.add_argument(
        "--defaults",
        action="store_true",
        help="Fill a newly created config file with default values instead of empty ones.",
    )
    return parser


def _load(config_dir: Optional[str], defaults: bool) -> BotConfig:
    if config_dir is None:
        return BotConfig.load("bot app", populate_with_defaults=defaults)
    return BotConfig.load_with_dir("bot app", config_dir, populate_with_defaults=defaults)


def main() -> None:
    args = _build_parser().parse_args()
    try:
        config = _load(args.config_dir, args.defaults)
    except ConfigError as e:
        raise SystemExit(str(e)) from e

    logging.basicConfig(level=config.logging.level)
    logger = logging.getLogger("bot-app")
    logger.info("Config loaded path=%s", BotConfig.config_path("bot app", args.config_dir))
    logger.info("Bot username=%s channel=%s", config.bot_username, config.channel)


if __name__ == "__main__":
    main()

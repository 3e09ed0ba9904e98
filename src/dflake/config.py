"""
Configuration management for dflake.

Settings come from ``DFLAKE_*`` environment variables and, optionally, the
``[dflake]`` table of a dflake.toml file. Only the CLI reads configuration;
the decoding functions take their epoch as an argument.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dflake.decoder import SnowflakeDecoder
from dflake.models import DISCORD_EPOCH

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "dflake.toml"


class Settings(BaseSettings):
    """Main configuration for dflake."""

    epoch: int = Field(
        default=DISCORD_EPOCH,
        ge=0,
        description="Epoch in Unix milliseconds added to the snowflake timestamp",
    )
    output: Literal["text", "json"] = Field(
        default="text", description="CLI output format"
    )
    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    model_config = SettingsConfigDict(
        env_prefix="DFLAKE_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_toml(cls, path: Path | str) -> Settings:
        """
        Load settings from the [dflake] table of a TOML file.

        Args:
            path: Path to dflake.toml

        Returns:
            Settings instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the dflake entry is not a table
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        logger.debug(f"Loading configuration from {config_path}")
        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        section = data.get("dflake", {})
        if not isinstance(section, dict):
            raise ValueError(f"[dflake] in {config_path} must be a table")

        return cls(**section)

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Settings:
        """
        Find and load settings from dflake.toml.

        Searches from start_dir up through parent directories. Falls back to
        defaults (plus environment) when no file is found.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Settings instance
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        logger.debug(f"No {CONFIG_FILENAME} found from {start_dir}, using defaults")
        return cls()

    def make_decoder(self) -> SnowflakeDecoder:
        """Build a decoder for the configured epoch."""
        return SnowflakeDecoder(epoch=self.epoch)

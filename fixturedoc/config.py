"""
Configuration for fixturedoc.

Settings come from the environment (a ``.env`` file is honored) and are
overridden by command line options.

Environment variables:
    FIXTUREDOC_OUTPUT_DIR       Directory receiving the JSON records (default: .)
    FIXTUREDOC_IGNORED_METHODS  Comma-separated method names to skip, on top
                                of the built-in ones
    FIXTUREDOC_LOG_LEVEL        Logging level (default: INFO)
"""

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field

from fixturedoc.assembler import DEFAULT_IGNORED_METHODS
from fixturedoc.errors import FixtureDocError

ENV_PREFIX = "FIXTUREDOC_"


class Settings(BaseModel):
    """Runtime settings."""
    output_dir: Path = Field(Path("."), description="Directory receiving the JSON records")
    ignored_methods: List[str] = Field(
        default_factory=lambda: sorted(DEFAULT_IGNORED_METHODS),
        description="Method names never documented"
    )
    log_level: str = Field("INFO", description="Logging level name")

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            load_env_file: Load the nearest ``.env`` file first

        Raises:
            FixtureDocError: If the log level is not a logging level name
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        settings = cls()

        output_dir = os.getenv(f"{ENV_PREFIX}OUTPUT_DIR")
        if output_dir:
            settings.output_dir = Path(output_dir)

        extra = os.getenv(f"{ENV_PREFIX}IGNORED_METHODS", "")
        names = [name.strip() for name in extra.split(",") if name.strip()]
        if names:
            settings.ignored_methods = sorted(set(settings.ignored_methods) | set(names))

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            level = log_level.strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise FixtureDocError(f"Unknown log level in {ENV_PREFIX}LOG_LEVEL: {log_level!r}")
            settings.log_level = level

        return settings

"""Configuration management."""

import os
from dataclasses import dataclass
from pathlib import Path

from kyujitsu.holidays import DEFAULT_HOLIDAYS_PATH

HOLIDAYS_PATH_ENV = "KYUJITSU_HOLIDAYS_PATH"


@dataclass
class Config:
    """Location of the holiday file."""

    holidays_path: Path = DEFAULT_HOLIDAYS_PATH

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            return cls(holidays_path=Path(os.environ[HOLIDAYS_PATH_ENV]))
        except KeyError:
            return None

    @classmethod
    def default(cls) -> "Config":
        """Configuration with the bundled ./res/holidays.yml path."""
        return cls()

    @classmethod
    def resolve(cls) -> "Config":
        """Environment configuration if set, otherwise the default."""
        return cls.from_env() or cls.default()

"""
sweid configuration management using pydantic-settings.

The validators themselves never read settings; callers pass options in
explicitly. Settings exist so applications can keep those options, and
the log level, in the environment.
"""

import logging
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SWEID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    allow_coordination_number: bool = Field(
        default=True,
        description="Accept samordningsnummer when parsing personnummer",
    )
    format_style: Literal["long", "short"] = Field(
        default="short",
        description="Default personnummer output: 'long' (12 digits) or 'short'",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def parse_options(self) -> dict:
        """Keyword arguments for ``parse_personnummer``."""
        return {"allow_coordination_number": self.allow_coordination_number}

    def format_options(self) -> dict:
        """Keyword arguments for ``format_personnummer``."""
        return {"style": self.format_style}


def configure_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=LOG_FORMAT,
    )


# Global settings instance
settings = Settings()

"""
Configuration for ketab-protocol callers.

Settings come from the environment, optionally seeded from a ``.env`` file:

    KETAB_NSEC              Secret key as 64-char hex or bech32 nsec
    KETAB_LOG_LEVEL         Logging level name (default INFO)
    KETAB_PROTOCOL_VERSION  Protocol version to stamp on new libraries
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .exceptions import ValidationError
from .kinds import PROTOCOL_VERSION
from .signing import parse_secret_key

logger = logging.getLogger("ketab-protocol")

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class KetabSettings(BaseModel):
    """Runtime settings for code that builds and signs Ketab events."""

    nsec: str | None = Field(
        default=None,
        description="Secret key as 64-char hex or bech32 nsec"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the ketab-protocol logger"
    )
    protocol_version: str = Field(
        default=PROTOCOL_VERSION,
        description="Protocol version written into new Library content"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("protocol_version")
    @classmethod
    def validate_protocol_version(cls, v: str) -> str:
        """Ensure protocol version is non-empty."""
        if not v or not v.strip():
            raise ValueError("protocol_version cannot be empty")
        return v.strip()

    def secret_key(self) -> bytes:
        """Return the configured secret key as 32 bytes.

        Raises:
            ValidationError: If no key is configured
        """
        if not self.nsec:
            raise ValidationError("nsec", "no secret key configured; set KETAB_NSEC")
        return parse_secret_key(self.nsec)


def load_settings() -> KetabSettings:
    """Load settings from a ``.env`` file (if any) and the environment."""
    if not load_dotenv():
        logger.debug("No .env file found, reading settings from the environment only")

    values: dict[str, str] = {}
    for field_name, env_name in (
        ("nsec", "KETAB_NSEC"),
        ("log_level", "KETAB_LOG_LEVEL"),
        ("protocol_version", "KETAB_PROTOCOL_VERSION"),
    ):
        value = os.getenv(env_name)
        if value:
            values[field_name] = value

    return KetabSettings(**values)


def configure_logging(settings: KetabSettings) -> None:
    """Apply the configured level to the root and ketab-protocol loggers."""
    logging.basicConfig(level=settings.log_level)
    logger.setLevel(settings.log_level)
    logger.debug(f"🔧 Logging configured at {settings.log_level}")


__all__ = [
    "KetabSettings",
    "load_settings",
    "configure_logging",
]

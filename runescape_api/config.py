"""Configuration management for runescape-api."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration."""

    # Web services
    web_services_url: str = field(
        default_factory=lambda: os.getenv(
            "RUNESCAPE_WEB_SERVICES_URL", "http://services.runescape.com"
        )
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("RUNESCAPE_TIMEOUT", "10"))
    )
    user_agent: str = field(
        default_factory=lambda: os.getenv("RUNESCAPE_USER_AGENT", "runescape-api/1.0")
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )

    def __post_init__(self) -> None:
        """Normalize the web-services URL."""
        self.web_services_url = self.web_services_url.rstrip("/")

    @property
    def logging_level(self) -> int:
        """Numeric level for ``logging``, falling back to INFO."""
        return getattr(logging, self.log_level, logging.INFO)

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = []
        if not self.web_services_url.startswith(("http://", "https://")):
            errors.append("RUNESCAPE_WEB_SERVICES_URL must be an http(s) URL")
        if self.timeout <= 0:
            errors.append("RUNESCAPE_TIMEOUT must be positive")
        if not self.user_agent:
            errors.append("RUNESCAPE_USER_AGENT must not be empty")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return errors


# Global config instance
config = Config()

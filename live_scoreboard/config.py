"""Configuration management for the live scoreboard."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from decouple import Choices
from decouple import config

from .core.enums import TieBreak


class Environment(Enum):
    """Supported deployment environments."""

    DEVELOPMENT = "development"
    CI = "CI"
    PRODUCTION = "production"


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMATS = ["json", "text"]


@dataclass
class Config:
    """Configuration for the live scoreboard."""

    # Environment configuration
    environment: Environment = Environment.DEVELOPMENT

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"

    # Summary ordering for games with equal totals
    summary_tie_break: TieBreak = TieBreak.MOST_RECENT

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(
            config("ENVIRONMENT", default="development", cast=Choices([e.value for e in Environment]))
        )

        return cls(
            environment=env,
            # Logging
            log_level=config("LOG_LEVEL", default="INFO", cast=Choices(LOG_LEVELS)),
            log_format=config("LOG_FORMAT", default="json", cast=Choices(LOG_FORMATS)),
            # Summary
            summary_tie_break=TieBreak(
                config(
                    "SUMMARY_TIE_BREAK",
                    default=TieBreak.MOST_RECENT.value,
                    cast=Choices([t.value for t in TieBreak]),
                )
            ),
        )

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == Environment.CI

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


_config: Optional[Config] = None


def init_config() -> Config:
    """Load the process-wide configuration from the environment."""
    global _config
    _config = Config.from_env()
    return _config


def get_config() -> Config:
    """Get the process-wide configuration.

    Raises:
        RuntimeError: If init_config() has not been called
    """
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call init_config() first.")
    return _config


def reset_config() -> None:
    """Drop the process-wide configuration."""
    global _config
    _config = None


def is_config_initialized() -> bool:
    """Check if the process-wide configuration has been loaded."""
    return _config is not None

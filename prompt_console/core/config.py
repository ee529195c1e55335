"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the console.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Console settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend
    api_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the prompt catalog backend.",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for backend requests.",
    )
    playground_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Timeout in seconds for playground requests (model calls are slow).",
    )

    # Template resolution
    placeholder_policy: str = Field(
        default="strict",
        description="Placeholder name policy: 'strict' (word characters) or 'loose'.",
    )
    missing_value_fallback: str = Field(
        default="empty",
        description="Rendering of placeholders without a value: 'empty' or 'verbatim'.",
    )

    # Playground defaults
    default_left_model: str = Field(
        default="openai/gpt-4",
        description="Model shown in the left playground panel.",
    )
    default_right_model: str = Field(
        default="anthropic/claude-3-opus",
        description="Model shown in the right playground panel.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for info.log and error.log. Console only when unset.",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("placeholder_policy", "missing_value_fallback")
    @classmethod
    def normalize_choice(cls, v: str) -> str:
        """Normalize policy names to lowercase."""
        return v.strip().lower()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings


def reset_settings() -> None:
    """Forget the cached Settings instance so the next call reloads it."""
    global _settings
    _settings = None

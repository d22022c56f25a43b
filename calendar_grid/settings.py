"""
Configuration settings for the calendar grid library.

Centralized configuration using Pydantic Settings for type-safe environment
variable handling. All settings can be overridden via environment variables
with the CALENDAR_GRID_ prefix.

Example:
    export CALENDAR_GRID_LOG_LEVEL=DEBUG
    export CALENDAR_GRID_FIRST_DAY_OF_WEEK=1
    python -m calendar_grid --month 6 --year 2015
"""

import logging
from typing import Any
from typing import Dict

from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

# The grid reaches into the neighbouring years, so both ends stay one year
# inside the range datetime can represent (1-9999).
YEAR_FLOOR = 2
YEAR_CEILING = 9998


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    All settings can be overridden via environment variables with the
    CALENDAR_GRID_ prefix (e.g., CALENDAR_GRID_MAX_YEAR=2100).
    """

    model_config = SettingsConfigDict(
        env_prefix="CALENDAR_GRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode with plain-text verbose logging"
    )

    # Grid defaults
    first_day_of_week: int = Field(
        default=0,
        ge=0,
        le=6,
        description="Default first day of the week (0 = Sunday, 6 = Saturday)"
    )

    min_year: int = Field(
        default=1900,
        ge=YEAR_FLOOR,
        le=YEAR_CEILING,
        description="Smallest year accepted by CalendarGrid"
    )

    max_year: int = Field(
        default=9998,
        ge=YEAR_FLOOR,
        le=YEAR_CEILING,
        description="Largest year accepted by CalendarGrid"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level is a valid logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}, got {v}")
        return upper_v

    @model_validator(mode="after")
    def validate_year_bounds(self) -> "Settings":
        """Make sure the supported year range is not empty."""
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must not exceed max_year ({self.max_year})"
            )
        return self

    @property
    def logging_config(self) -> Dict[str, Any]:
        """Get logging configuration dict."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "structured": {
                    "()": "pythonjsonlogger.json.JsonFormatter",
                    "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": self.log_level,
                    "formatter": "standard" if self.debug_mode else "structured",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "calendar_grid": {
                    "level": self.log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }

    def setup_logging(self) -> None:
        """Configure library logging based on current settings."""
        import logging.config

        logging.config.dictConfig(self.logging_config)

        import structlog

        # JSON events in production, readable key=value pairs in debug mode
        renderer = (
            structlog.dev.ConsoleRenderer(colors=False)
            if self.debug_mode
            else structlog.processors.JSONRenderer()
        )

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                renderer,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.getLogger(__name__).debug(
            f"Logging configured at level {self.log_level} (debug_mode={self.debug_mode})"
        )


# Global settings instance
settings = Settings()


# Convenience function for external usage
def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings

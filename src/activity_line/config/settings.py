"""Runtime configuration settings for activity-line.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables. This provides:
- Type validation
- Environment variable support (ACTIVITY_LINE_ prefix)
- Default values
- Easy testing via dependency injection
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from activity_line.config.paths import get_default_config_file
from activity_line.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_SIZE_MB,
    LOG_LEVEL_DEBUG,
    VALID_LOG_LEVELS,
)


class ActivityLineSettings(BaseSettings):
    """Process-level settings.

    These settings control where the rendering config is read from and how
    diagnostics are logged. Can be overridden via environment variables
    with the ACTIVITY_LINE_ prefix (e.g. ``ACTIVITY_LINE_LOG_LEVEL=DEBUG``).
    """

    model_config = SettingsConfigDict(env_prefix="ACTIVITY_LINE_")

    config_file: Path = Field(
        default_factory=get_default_config_file,
        description="Rendering config (YAML)",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Log level")
    log_file: Path | None = Field(
        default=None,
        description="Log file; logs go to stderr when unset",
    )
    log_max_size_mb: int = Field(
        default=DEFAULT_LOG_MAX_SIZE_MB,
        ge=1,
        description="Maximum log file size before rotation",
    )
    log_backup_count: int = Field(
        default=DEFAULT_LOG_BACKUP_COUNT,
        ge=0,
        description="Rotated log files to keep",
    )
    debug: bool = Field(default=False, description="Force DEBUG logging")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    def get_effective_log_level(self) -> str:
        """Get the effective log level, accounting for the debug flag."""
        if self.debug:
            return LOG_LEVEL_DEBUG
        return self.log_level


def get_settings() -> ActivityLineSettings:
    """Read settings from the current environment."""
    return ActivityLineSettings()

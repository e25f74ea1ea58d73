"""Custom exceptions for activity-line.

Exception hierarchy:
    ActivityLineError (base)
    ├── ConfigurationError
    └── ValidationError

The transcript ingestor and the line renderers never raise these to their
callers; they are used by model invariants and configuration loading.
"""

from pathlib import Path
from typing import Any

# Invalid values longer than this are cut in error details
_MAX_VALUE_REPR = 100


class ActivityLineError(Exception):
    """Base exception for all activity-line errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(ActivityLineError):
    """Raised when configuration is invalid or cannot be loaded.

    Examples:
        - Invalid YAML syntax in the config file
        - A color that is neither 16-color, 256-color nor RGB
    """

    def __init__(
        self,
        message: str,
        config_file: Path | None = None,
        key: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Error description.
            config_file: Path to the problematic config file.
            key: The configuration key that caused the error.
        """
        details = {}
        if config_file:
            details["config_file"] = str(config_file)
        if key:
            details["key"] = key
        super().__init__(message, details)
        self.config_file = config_file
        self.key = key


class ValidationError(ActivityLineError):
    """Raised when an activity entity would break its lifecycle invariants.

    Examples:
        - A completed tool invocation without an end time
    """

    def __init__(
        self,
        message: str,
        field: str,
        value: Any = None,
        expected: str | None = None,
    ):
        """Initialize validation error.

        Args:
            message: Error description.
            field: The field that failed validation.
            value: The invalid value (truncated if too long).
            expected: Description of the expected value.
        """
        details: dict[str, Any] = {"field": field}
        if value is not None:
            value_str = str(value)
            if len(value_str) > _MAX_VALUE_REPR:
                value_str = value_str[:_MAX_VALUE_REPR] + "..."
            details["value"] = value_str
        if expected:
            details["expected"] = expected
        super().__init__(message, details)
        self.field = field
        self.value = value
        self.expected = expected

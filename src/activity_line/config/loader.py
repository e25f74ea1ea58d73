"""Loading and saving the rendering configuration file."""

import logging
from pathlib import Path

from activity_line.exceptions import ConfigurationError
from activity_line.models.config import ActivityLinesConfig

logger = logging.getLogger(__name__)


def load_activity_config(config_file: Path) -> ActivityLinesConfig:
    """Load the rendering configuration.

    Args:
        config_file: Path to the YAML config file.

    Returns:
        ActivityLinesConfig from the file (defaults if not configured).

    Note:
        Returns defaults on error rather than raising, so a broken config
        never blanks the status line.
    """
    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return ActivityLinesConfig()

    try:
        config = ActivityLinesConfig.load(config_file)
    except ConfigurationError as e:
        logger.warning(f"Invalid activity-line config: {e}")
        logger.info("Using default configuration")
        return ActivityLinesConfig()

    logger.debug(
        f"Loaded config from {config_file}: tools={config.show_tools}, "
        f"agents={config.show_agents}"
    )
    return config


def save_activity_config(config: ActivityLinesConfig, config_file: Path) -> None:
    """Save the rendering configuration, creating parent directories.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    try:
        config.save(config_file)
    except OSError as e:
        raise ConfigurationError(f"Cannot write config: {e}", config_file=config_file) from e
    logger.info(f"Saved config to {config_file}")

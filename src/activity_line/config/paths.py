"""Path constants for activity-line.

All files live beside Claude Code's own configuration in the user's home
directory, so a status-line command works from any project.
"""

from pathlib import Path

# =============================================================================
# Core Directory Structure
# =============================================================================

CLAUDE_DIR = ".claude"
CONFIG_DIR_NAME = "activity-line"
CONFIG_FILENAME = "config.yaml"
DOTENV_FILENAME = ".env"


def get_config_dir() -> Path:
    """Return ``~/.claude/activity-line``."""
    return Path.home() / CLAUDE_DIR / CONFIG_DIR_NAME


def get_default_config_file() -> Path:
    """Return the default rendering config path."""
    return get_config_dir() / CONFIG_FILENAME

"""Constants for activity-line.

This module centralizes the magic strings and numbers used across the
package. Constants are organized by domain:
- Transcript record and content block keys
- Tool names and target extraction
- Retention limits
- Line rendering defaults and icons
- Logging

For paths and runtime settings, import from:
- activity_line.config.paths
- activity_line.config.settings

For type-safe enums, import from:
- activity_line.models.enums
"""

from typing import Final

from activity_line import __version__

# =============================================================================
# Version
# =============================================================================

VERSION: Final[str] = __version__

# =============================================================================
# Transcript Records
# =============================================================================

RECORD_KEY_TIMESTAMP: Final[str] = "timestamp"
RECORD_KEY_MESSAGE: Final[str] = "message"
MESSAGE_KEY_CONTENT: Final[str] = "content"

BLOCK_KEY_TYPE: Final[str] = "type"
BLOCK_KEY_ID: Final[str] = "id"
BLOCK_KEY_NAME: Final[str] = "name"
BLOCK_KEY_INPUT: Final[str] = "input"
BLOCK_KEY_TOOL_USE_ID: Final[str] = "tool_use_id"
BLOCK_KEY_IS_ERROR: Final[str] = "is_error"

BLOCK_TYPE_TOOL_USE: Final[str] = "tool_use"
BLOCK_TYPE_TOOL_RESULT: Final[str] = "tool_result"

# Naive timestamps (no offset) are accepted in these layouts, as local time
NAIVE_TIMESTAMP_FORMATS: Final[tuple[str, ...]] = (
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
)

# =============================================================================
# Tools and Agents
# =============================================================================

# The Task tool spawns a subagent; it is tracked as an agent, not a tool
TASK_TOOL_NAME: Final[str] = "Task"
# TodoWrite only updates the todo list and is never tracked
IGNORED_TOOL_NAMES: Final[frozenset[str]] = frozenset({"TodoWrite"})

AGENT_INPUT_KEY_TYPE: Final[str] = "subagent_type"
AGENT_INPUT_KEY_MODEL: Final[str] = "model"
AGENT_INPUT_KEY_DESCRIPTION: Final[str] = "description"
UNKNOWN_AGENT_TYPE: Final[str] = "unknown"

# Input keys holding the display target, tried in order, per tool name
FILE_TARGET_KEYS: Final[tuple[str, ...]] = ("file_path", "path")
TARGET_KEYS_BY_TOOL: Final[dict[str, tuple[str, ...]]] = {
    "Read": FILE_TARGET_KEYS,
    "Write": FILE_TARGET_KEYS,
    "Edit": FILE_TARGET_KEYS,
    "Glob": ("pattern",),
    "Grep": ("pattern",),
    "Bash": ("command",),
    "WebFetch": ("url",),
    "WebSearch": ("query",),
}
# Free-text targets are cut to a preview at creation time
PREVIEW_TARGET_TOOLS: Final[frozenset[str]] = frozenset({"Bash", "WebFetch", "WebSearch"})
MAX_TARGET_PREVIEW_LEN: Final[int] = 30

# =============================================================================
# Retention
# =============================================================================

MAX_TOOLS: Final[int] = 20
MAX_AGENTS: Final[int] = 10

# =============================================================================
# Line Rendering
# =============================================================================

ELLIPSIS: Final[str] = "..."
PATH_ELLIPSIS_PREFIX: Final[str] = ".../"

ICON_RUNNING: Final[str] = "\u25d0"  # half-filled circle
ICON_COMPLETED: Final[str] = "\u2713"  # check mark
ICON_ERROR: Final[str] = "\u2717"  # ballot x

DEFAULT_SEPARATOR: Final[str] = " | "

DEFAULT_MAX_RUNNING_TOOLS: Final[int] = 2
DEFAULT_MAX_COMPLETED_TOOLS: Final[int] = 4
DEFAULT_MAX_TARGET_LEN: Final[int] = 20

DEFAULT_MAX_AGENTS: Final[int] = 3
DEFAULT_MAX_DESCRIPTION_LEN: Final[int] = 40
# Completed agents shown after the running ones, most recent first
MAX_RECENT_COMPLETED_AGENTS: Final[int] = 2

# 16-color palette indexes used by the default theme
COLOR16_RED: Final[int] = 1
COLOR16_GREEN: Final[int] = 2
COLOR16_YELLOW: Final[int] = 3
COLOR16_MAGENTA: Final[int] = 5
COLOR16_CYAN: Final[int] = 6
COLOR16_GRAY: Final[int] = 8

ANSI_RESET: Final[str] = "\x1b[0m"

# =============================================================================
# Status Line Input
# =============================================================================

STATUSLINE_KEY_TRANSCRIPT_PATH: Final[str] = "transcript_path"
STDIN_TIMEOUT_SECONDS: Final[float] = 2.0
STDIN_READ_CHUNK_BYTES: Final[int] = 65536

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL_DEBUG: Final[str] = "DEBUG"
LOG_LEVEL_INFO: Final[str] = "INFO"
LOG_LEVEL_WARNING: Final[str] = "WARNING"
LOG_LEVEL_ERROR: Final[str] = "ERROR"
VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_INFO,
    LOG_LEVEL_WARNING,
    LOG_LEVEL_ERROR,
)
DEFAULT_LOG_LEVEL: Final[str] = LOG_LEVEL_WARNING
DEFAULT_LOG_MAX_SIZE_MB: Final[int] = 5
DEFAULT_LOG_BACKUP_COUNT: Final[int] = 3
PACKAGE_LOGGER_NAME: Final[str] = "activity_line"

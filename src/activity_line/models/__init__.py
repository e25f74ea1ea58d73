"""Data models for activity-line"""

from .activity import ActivitySnapshot, AgentTask, Clock, ToolInvocation, utc_now
from .colors import AnsiColor, Color16, Color256, RgbColor, apply_color, strip_ansi
from .config import ActivityLinesConfig, AgentsLineConfig, ToolsLineConfig
from .enums import AgentStatus, ToolStatus

__all__ = [
    "ActivitySnapshot",
    "AgentTask",
    "ToolInvocation",
    "Clock",
    "utc_now",
    "AgentStatus",
    "ToolStatus",
    "AnsiColor",
    "Color16",
    "Color256",
    "RgbColor",
    "apply_color",
    "strip_ansi",
    "ActivityLinesConfig",
    "AgentsLineConfig",
    "ToolsLineConfig",
]

"""Enum types for activity-line.

Statuses are closed variant sets so the end-time invariant and icon
selection can be checked exhaustively.
"""

from enum import Enum


class ToolStatus(str, Enum):
    """Lifecycle of a tool invocation."""

    RUNNING = "running"
    COMPLETED = "completed"
    ERROR = "error"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all status values."""
        return [s.value for s in cls]

    @property
    def is_terminal(self) -> bool:
        """Whether the invocation has finished (successfully or not)."""
        return self is not ToolStatus.RUNNING


class AgentStatus(str, Enum):
    """Lifecycle of a subagent task. Agent results carry no error flag."""

    RUNNING = "running"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all status values."""
        return [s.value for s in cls]

    @property
    def is_terminal(self) -> bool:
        """Whether the task has finished."""
        return self is AgentStatus.COMPLETED

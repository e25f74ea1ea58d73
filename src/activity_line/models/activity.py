"""Activity data model: tool invocations, agent tasks and the snapshot.

Entities are frozen dataclasses. The ingestor replaces an entity with its
completed copy when a matching result arrives; once the snapshot is built
nothing is mutated again and renderers only read it.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from typing import Any

from activity_line.exceptions import ValidationError
from activity_line.models.enums import AgentStatus, ToolStatus

# Returns the current instant as an aware datetime
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: the current wall-clock time in UTC."""
    return datetime.now(UTC)


def _elapsed(start: datetime, end: datetime | None, now: datetime) -> timedelta:
    delta = (end or now) - start
    return max(delta, timedelta(0))


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class ToolInvocation:
    """A single tool call tracked from its tool_use block.

    Attributes:
        id: Correlation id of the tool_use block.
        name: Tool name (e.g. "Read", "Edit", "Bash").
        target: Short descriptor (file path, pattern, command preview).
        status: Current lifecycle status.
        start_time: When the tool was invoked.
        end_time: When the matching result arrived; set iff terminal.
    """

    id: str
    name: str
    target: str | None = None
    status: ToolStatus = ToolStatus.RUNNING
    start_time: datetime = field(default_factory=utc_now)
    end_time: datetime | None = None

    def __post_init__(self) -> None:
        """Validate the end-time invariant."""
        if self.status.is_terminal != (self.end_time is not None):
            raise ValidationError(
                "end_time must be set exactly when the tool has finished",
                field="end_time",
                value=self.end_time,
                expected=f"{'a datetime' if self.status.is_terminal else 'None'} "
                f"for status {self.status.value}",
            )

    @property
    def is_running(self) -> bool:
        return self.status is ToolStatus.RUNNING

    def complete(self, is_error: bool, at: datetime) -> "ToolInvocation":
        """Return the terminal copy of a running invocation.

        Args:
            is_error: Whether the tool result was flagged as an error.
            at: Timestamp of the result record.

        Raises:
            ValidationError: If the invocation already finished.
        """
        if not self.is_running:
            raise ValidationError(
                "tool invocation already finished",
                field="status",
                value=self.status.value,
                expected=ToolStatus.RUNNING.value,
            )
        status = ToolStatus.ERROR if is_error else ToolStatus.COMPLETED
        return replace(self, status=status, end_time=at)

    def elapsed(self, now: datetime) -> timedelta:
        """Time from start to end, or to ``now`` while still running."""
        return _elapsed(self.start_time, self.end_time, now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "target": self.target,
            "status": self.status.value,
            "start_time": _isoformat(self.start_time),
            "end_time": _isoformat(self.end_time),
        }


@dataclass(frozen=True)
class AgentTask:
    """A subagent delegation tracked from a Task tool_use block.

    Attributes:
        id: Correlation id of the Task tool_use block.
        agent_type: Subagent type (e.g. "Explore", "Plan").
        model: Model requested for the subagent, if any.
        description: Free-text task description, if any.
        status: Current lifecycle status.
        start_time: When the agent was started.
        end_time: When the agent's result arrived; set iff completed.
    """

    id: str
    agent_type: str
    model: str | None = None
    description: str | None = None
    status: AgentStatus = AgentStatus.RUNNING
    start_time: datetime = field(default_factory=utc_now)
    end_time: datetime | None = None

    def __post_init__(self) -> None:
        """Validate the end-time invariant."""
        if self.status.is_terminal != (self.end_time is not None):
            raise ValidationError(
                "end_time must be set exactly when the agent has completed",
                field="end_time",
                value=self.end_time,
                expected=f"{'a datetime' if self.status.is_terminal else 'None'} "
                f"for status {self.status.value}",
            )

    @property
    def is_running(self) -> bool:
        return self.status is AgentStatus.RUNNING

    def complete(self, at: datetime) -> "AgentTask":
        """Return the completed copy of a running task.

        Raises:
            ValidationError: If the task already completed.
        """
        if not self.is_running:
            raise ValidationError(
                "agent task already completed",
                field="status",
                value=self.status.value,
                expected=AgentStatus.RUNNING.value,
            )
        return replace(self, status=AgentStatus.COMPLETED, end_time=at)

    def elapsed(self, now: datetime) -> timedelta:
        """Time from start to end, or to ``now`` while still running."""
        return _elapsed(self.start_time, self.end_time, now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "agent_type": self.agent_type,
            "model": self.model,
            "description": self.description,
            "status": self.status.value,
            "start_time": _isoformat(self.start_time),
            "end_time": _isoformat(self.end_time),
        }


@dataclass(frozen=True)
class ActivitySnapshot:
    """Immutable, bounded, time-ordered activity handed to the renderers.

    Attributes:
        tools: Tool invocations, ascending by start time.
        agents: Agent tasks, ascending by start time.
        session_start: Earliest parseable timestamp in the transcript.
    """

    tools: tuple[ToolInvocation, ...] = ()
    agents: tuple[AgentTask, ...] = ()
    session_start: datetime | None = None

    def running_tools(self) -> list[ToolInvocation]:
        return [t for t in self.tools if t.status is ToolStatus.RUNNING]

    def completed_tools(self) -> list[ToolInvocation]:
        """Finished tools, including errors."""
        return [t for t in self.tools if t.status is not ToolStatus.RUNNING]

    def running_agents(self) -> list[AgentTask]:
        return [a for a in self.agents if a.status is AgentStatus.RUNNING]

    def completed_agents(self) -> list[AgentTask]:
        return [a for a in self.agents if a.status is AgentStatus.COMPLETED]

    def has_activity(self) -> bool:
        return bool(self.tools or self.agents)

    def session_elapsed(self, now: datetime) -> timedelta | None:
        """Time since the session started, or None if it is unknown."""
        if self.session_start is None:
            return None
        return _elapsed(self.session_start, None, now)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view of the snapshot."""
        return {
            "session_start": _isoformat(self.session_start),
            "tools": [t.to_dict() for t in self.tools],
            "agents": [a.to_dict() for a in self.agents],
        }

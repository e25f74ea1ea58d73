"""Transcript parsing for session activity.

Reads a Claude Code JSONL transcript (one JSON record per line) and tracks
every tool call and subagent from its ``tool_use`` block to the matching
``tool_result`` block::

    {"timestamp": "...", "message": {"content": [
        {"type": "tool_use", "id": "toolu_1", "name": "Read", "input": {...}}]}}
    {"timestamp": "...", "message": {"content": [
        {"type": "tool_result", "tool_use_id": "toolu_1", "is_error": false}]}}

Parsing is best-effort: a missing or unreadable file, malformed lines and
results without a matching start never raise, they only shrink the snapshot.
Timestamps without an offset are read as local time and stored as UTC.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from activity_line.constants import (
    AGENT_INPUT_KEY_DESCRIPTION,
    AGENT_INPUT_KEY_MODEL,
    AGENT_INPUT_KEY_TYPE,
    BLOCK_KEY_ID,
    BLOCK_KEY_INPUT,
    BLOCK_KEY_IS_ERROR,
    BLOCK_KEY_NAME,
    BLOCK_KEY_TOOL_USE_ID,
    BLOCK_KEY_TYPE,
    BLOCK_TYPE_TOOL_RESULT,
    BLOCK_TYPE_TOOL_USE,
    ELLIPSIS,
    IGNORED_TOOL_NAMES,
    MAX_AGENTS,
    MAX_TARGET_PREVIEW_LEN,
    MAX_TOOLS,
    MESSAGE_KEY_CONTENT,
    NAIVE_TIMESTAMP_FORMATS,
    PREVIEW_TARGET_TOOLS,
    RECORD_KEY_MESSAGE,
    RECORD_KEY_TIMESTAMP,
    TARGET_KEYS_BY_TOOL,
    TASK_TOOL_NAME,
    UNKNOWN_AGENT_TYPE,
)
from activity_line.models.activity import (
    ActivitySnapshot,
    AgentTask,
    Clock,
    ToolInvocation,
    utc_now,
)

logger = logging.getLogger(__name__)


class _IngestState:
    """Open entities keyed by correlation id, discarded after the snapshot."""

    def __init__(self) -> None:
        self.tools: dict[str, ToolInvocation] = {}
        self.agents: dict[str, AgentTask] = {}
        self.session_start: datetime | None = None

    def is_tracked(self, entity_id: str) -> bool:
        return entity_id in self.tools or entity_id in self.agents

    def start_tool(self, tool: ToolInvocation) -> None:
        self.tools[tool.id] = tool

    def start_agent(self, agent: AgentTask) -> None:
        self.agents[agent.id] = agent

    def finish(self, tool_use_id: str, is_error: bool, at: datetime) -> None:
        """Close the open entity a result refers to; other results are dropped."""
        tool = self.tools.get(tool_use_id)
        if tool is not None and tool.is_running:
            self.tools[tool_use_id] = tool.complete(is_error, at)
            return

        agent = self.agents.get(tool_use_id)
        if agent is not None and agent.is_running:
            self.agents[tool_use_id] = agent.complete(at)
            return

        logger.debug(f"Dropping result with no open entry: {tool_use_id}")

    def to_snapshot(self) -> ActivitySnapshot:
        """Order by start time and keep only the most recent entries."""
        # sorted() is stable, so equal start times keep discovery order
        tools = sorted(self.tools.values(), key=lambda t: t.start_time)
        agents = sorted(self.agents.values(), key=lambda a: a.start_time)
        return ActivitySnapshot(
            tools=tuple(tools[-MAX_TOOLS:]),
            agents=tuple(agents[-MAX_AGENTS:]),
            session_start=self.session_start,
        )


def parse_transcript_activity(
    transcript_path: str | Path,
    clock: Clock = utc_now,
) -> ActivitySnapshot:
    """Parse a JSONL transcript into an activity snapshot.

    Args:
        transcript_path: Path to the JSONL transcript file.
        clock: Source of the current time, used for records whose timestamp
            is missing or unparseable.

    Returns:
        ActivitySnapshot with the tracked tools and agents. Empty when the
        file is missing or unreadable.
    """
    path = Path(transcript_path)
    if not path.exists() or not path.is_file():
        logger.debug(f"Transcript file not found: {transcript_path}")
        return ActivitySnapshot()

    state = _IngestState()
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            for line_no, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    record = json.loads(line)
                except (ValueError, RecursionError):
                    # JSONDecodeError, oversized integer literals and runaway nesting
                    logger.debug(f"Skipping malformed line {line_no} in {path}")
                    continue
                if not isinstance(record, dict):
                    continue
                _process_record(record, state, clock)
    except OSError as e:
        # Keep whatever was read before the failure
        logger.debug(f"Error reading transcript {transcript_path}: {e}")

    return state.to_snapshot()


def _process_record(record: dict[str, Any], state: _IngestState, clock: Clock) -> None:
    """Apply every content block of one transcript record."""
    parsed = parse_timestamp(record.get(RECORD_KEY_TIMESTAMP))
    if parsed is not None and state.session_start is None:
        state.session_start = parsed
    timestamp = parsed or clock()

    message = record.get(RECORD_KEY_MESSAGE)
    if not isinstance(message, dict):
        return
    content = message.get(MESSAGE_KEY_CONTENT)
    if not isinstance(content, list):
        return

    for block in content:
        if not isinstance(block, dict):
            continue
        block_type = block.get(BLOCK_KEY_TYPE)
        if block_type == BLOCK_TYPE_TOOL_USE:
            _process_tool_use(block, timestamp, state)
        elif block_type == BLOCK_TYPE_TOOL_RESULT:
            _process_tool_result(block, timestamp, state)


def _process_tool_use(block: dict[str, Any], timestamp: datetime, state: _IngestState) -> None:
    block_id = block.get(BLOCK_KEY_ID)
    name = block.get(BLOCK_KEY_NAME)
    if not isinstance(block_id, str) or not isinstance(name, str):
        logger.debug("Dropping tool_use block without id or name")
        return
    if state.is_tracked(block_id):
        # Each id starts once; a repeated start never reopens a finished entry
        logger.debug(f"Ignoring repeated tool_use for {block_id}")
        return

    tool_input = block.get(BLOCK_KEY_INPUT)
    if not isinstance(tool_input, dict):
        tool_input = {}

    if name == TASK_TOOL_NAME:
        state.start_agent(_create_agent_task(block_id, tool_input, timestamp))
    elif name not in IGNORED_TOOL_NAMES:
        state.start_tool(
            ToolInvocation(
                id=block_id,
                name=name,
                target=extract_target(name, tool_input),
                start_time=timestamp,
            )
        )


def _process_tool_result(block: dict[str, Any], timestamp: datetime, state: _IngestState) -> None:
    tool_use_id = block.get(BLOCK_KEY_TOOL_USE_ID)
    if not isinstance(tool_use_id, str):
        return
    is_error = block.get(BLOCK_KEY_IS_ERROR) is True
    state.finish(tool_use_id, is_error, timestamp)


def _create_agent_task(block_id: str, tool_input: dict[str, Any], timestamp: datetime) -> AgentTask:
    agent_type = _string_field(tool_input, AGENT_INPUT_KEY_TYPE) or UNKNOWN_AGENT_TYPE
    return AgentTask(
        id=block_id,
        agent_type=agent_type,
        model=_string_field(tool_input, AGENT_INPUT_KEY_MODEL),
        description=_string_field(tool_input, AGENT_INPUT_KEY_DESCRIPTION),
        start_time=timestamp,
    )


def _string_field(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def extract_target(tool_name: str, tool_input: dict[str, Any]) -> str | None:
    """Extract the display target of a tool call from its input.

    File tools use the file path, pattern tools the pattern. Commands, URLs
    and search queries are cut to a short preview. Unknown tools have no
    target.

    Args:
        tool_name: Name of the tool.
        tool_input: The tool_use block's input object.

    Returns:
        The target string, or None.
    """
    for key in TARGET_KEYS_BY_TOOL.get(tool_name, ()):
        value = _string_field(tool_input, key)
        if value is None:
            continue
        if tool_name in PREVIEW_TARGET_TOOLS and len(value) > MAX_TARGET_PREVIEW_LEN:
            return value[:MAX_TARGET_PREVIEW_LEN] + ELLIPSIS
        return value
    return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a transcript timestamp into an aware UTC datetime.

    Accepts RFC 3339 with an offset (``Z`` included), then a naive
    ``YYYY-MM-DDTHH:MM:SS[.ffffff]`` read as local time.

    Returns:
        The parsed datetime, or None when the value is missing or
        unparseable.
    """
    if not isinstance(value, str) or not value:
        return None

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        parsed = None
    if parsed is not None and parsed.tzinfo is not None:
        return parsed.astimezone(UTC)

    for fmt in NAIVE_TIMESTAMP_FORMATS:
        try:
            naive = datetime.strptime(value, fmt)
        except ValueError:
            continue
        # astimezone() on a naive datetime assumes local time
        return naive.astimezone(UTC)

    logger.debug(f"Unparseable timestamp: {value!r}")
    return None

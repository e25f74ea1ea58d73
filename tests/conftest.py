"""Pytest configuration and fixtures for activity-line tests."""

import json
import logging
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from activity_line.constants import PACKAGE_LOGGER_NAME

# Fixed instant all transcript timestamps are derived from
BASE_TIME = datetime(2025, 1, 15, 10, 0, 0, tzinfo=UTC)


def iso(at: datetime) -> str:
    """Format an aware datetime the way Claude Code writes transcript timestamps."""
    return at.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TranscriptBuilder:
    """Builds a JSONL transcript one record at a time."""

    def __init__(self, path: Path):
        self.path = path
        self.lines: list[str] = []

    def record(
        self, blocks: list[dict[str, Any]], at: datetime | None = None
    ) -> "TranscriptBuilder":
        record: dict[str, Any] = {"type": "assistant", "message": {"content": blocks}}
        if at is not None:
            record["timestamp"] = iso(at)
        self.lines.append(json.dumps(record))
        return self

    def tool_use(
        self,
        block_id: str,
        name: str,
        tool_input: dict[str, Any] | None = None,
        at: datetime | None = None,
    ) -> "TranscriptBuilder":
        block = {"type": "tool_use", "id": block_id, "name": name, "input": tool_input or {}}
        return self.record([block], at=at)

    def tool_result(
        self,
        tool_use_id: str,
        at: datetime | None = None,
        is_error: bool | None = None,
    ) -> "TranscriptBuilder":
        block: dict[str, Any] = {"type": "tool_result", "tool_use_id": tool_use_id}
        if is_error is not None:
            block["is_error"] = is_error
        return self.record([block], at=at)

    def task(
        self,
        block_id: str,
        agent_type: str | None = None,
        model: str | None = None,
        description: str | None = None,
        at: datetime | None = None,
    ) -> "TranscriptBuilder":
        tool_input = {
            key: value
            for key, value in (
                ("subagent_type", agent_type),
                ("model", model),
                ("description", description),
            )
            if value is not None
        }
        return self.tool_use(block_id, "Task", tool_input, at=at)

    def raw(self, line: str) -> "TranscriptBuilder":
        self.lines.append(line)
        return self

    def write(self) -> Path:
        self.path.write_text("\n".join(self.lines) + "\n", encoding="utf-8")
        return self.path


@pytest.fixture
def transcript(tmp_path: Path) -> TranscriptBuilder:
    """Create a transcript builder writing to a temporary JSONL file."""
    return TranscriptBuilder(tmp_path / "transcript.jsonl")


@pytest.fixture
def transcript_file(tmp_path: Path) -> Callable[..., Path]:
    """Create a temporary transcript JSONL file from a list of dicts."""

    def _create(lines: list[dict[str, Any]], filename: str = "transcript.jsonl") -> Path:
        path = tmp_path / filename
        path.write_text(
            "\n".join(json.dumps(line) for line in lines),
            encoding="utf-8",
        )
        return path

    return _create


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def clock_at() -> Callable[[datetime], Callable[[], datetime]]:
    """Create a clock frozen at the given instant."""

    def _clock(at: datetime) -> Callable[[], datetime]:
        return lambda: at

    return _clock


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock frozen ten minutes after BASE_TIME."""
    return lambda: BASE_TIME + timedelta(minutes=10)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the user's real config and environment overrides."""
    for name in (
        "ACTIVITY_LINE_CONFIG_FILE",
        "ACTIVITY_LINE_LOG_LEVEL",
        "ACTIVITY_LINE_LOG_FILE",
        "ACTIVITY_LINE_LOG_MAX_SIZE_MB",
        "ACTIVITY_LINE_LOG_BACKUP_COUNT",
        "ACTIVITY_LINE_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog sees package records in every test."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True

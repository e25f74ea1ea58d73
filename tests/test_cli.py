"""Tests for the activity-line CLI.

Tests for the render, inspect, config and version commands.
"""

import json
from datetime import timedelta
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from activity_line.cli import app
from activity_line.constants import ICON_COMPLETED, ICON_RUNNING, VERSION
from activity_line.models.config import ActivityLinesConfig


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def session_transcript(transcript, base_time) -> Path:
    """Transcript with two completed reads, a running edit and a finished agent."""
    return (
        transcript.tool_use("t1", "Read", {"file_path": "a.py"}, at=base_time)
        .tool_result("t1", at=base_time + timedelta(seconds=1))
        .tool_use("t2", "Read", {"file_path": "b.py"}, at=base_time + timedelta(seconds=2))
        .tool_result("t2", at=base_time + timedelta(seconds=3))
        .tool_use("t3", "Edit", {"file_path": "src/main.rs"}, at=base_time + timedelta(seconds=4))
        .task("a1", agent_type="Plan", description="Design API", at=base_time)
        .tool_result("a1", at=base_time + timedelta(seconds=65))
        .write()
    )


# =============================================================================
# render
# =============================================================================


def test_render_transcript_option(cli_runner: CliRunner, session_transcript: Path) -> None:
    """Test render prints the tools line then the agents line."""
    result = cli_runner.invoke(
        app, ["render", "--transcript", str(session_transcript), "--no-color"]
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        f"{ICON_RUNNING} Edit: src/main.rs | {ICON_COMPLETED} Read x2",
        f"{ICON_COMPLETED} Plan: Design API (1m 5s)",
    ]


def test_render_keeps_colors_by_default(cli_runner: CliRunner, session_transcript: Path) -> None:
    """Test escape codes survive when stdout is not a terminal."""
    result = cli_runner.invoke(app, ["render", "--transcript", str(session_transcript)])

    assert result.exit_code == 0
    assert "\x1b[36mEdit\x1b[0m" in result.stdout


def test_render_reads_transcript_path_from_stdin(
    cli_runner: CliRunner, session_transcript: Path
) -> None:
    """Test render uses transcript_path from the status-line JSON."""
    payload = json.dumps({"session_id": "s1", "transcript_path": str(session_transcript)})

    result = cli_runner.invoke(app, ["render", "--no-color"], input=payload)

    assert result.exit_code == 0
    assert len(result.stdout.splitlines()) == 2


@pytest.mark.parametrize("stdin", ["", "not json", '{"session_id": "s1"}'])
def test_render_without_transcript_prints_nothing(cli_runner: CliRunner, stdin: str) -> None:
    """Test render stays silent when no transcript is available."""
    result = cli_runner.invoke(app, ["render"], input=stdin)

    assert result.exit_code == 0
    assert result.stdout == ""


def test_render_missing_transcript_prints_nothing(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(app, ["render", "--transcript", str(tmp_path / "gone.jsonl")])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_render_line_toggles(cli_runner: CliRunner, session_transcript: Path) -> None:
    """Test --no-tools and --no-agents override the config."""
    base = ["render", "--transcript", str(session_transcript), "--no-color"]

    agents_only = cli_runner.invoke(app, [*base, "--no-tools"])
    tools_only = cli_runner.invoke(app, [*base, "--no-agents"])

    assert agents_only.stdout.splitlines() == [f"{ICON_COMPLETED} Plan: Design API (1m 5s)"]
    assert tools_only.stdout.splitlines() == [
        f"{ICON_RUNNING} Edit: src/main.rs | {ICON_COMPLETED} Read x2"
    ]


def test_render_uses_config_file(
    cli_runner: CliRunner, session_transcript: Path, tmp_path: Path
) -> None:
    """Test render applies limits and toggles from --config."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "show_agents: false\ntools:\n  max_completed: 0\n  separator: ' / '\n",
        encoding="utf-8",
    )

    result = cli_runner.invoke(
        app,
        [
            "render",
            "--transcript",
            str(session_transcript),
            "--config",
            str(config_file),
            "--no-color",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [f"{ICON_RUNNING} Edit: src/main.rs"]


def test_render_tools_flag_overrides_config(
    cli_runner: CliRunner, session_transcript: Path, tmp_path: Path
) -> None:
    config_file = tmp_path / "config.yaml"
    ActivityLinesConfig.none().save(config_file)

    result = cli_runner.invoke(
        app,
        [
            "render",
            "--transcript",
            str(session_transcript),
            "--config",
            str(config_file),
            "--tools",
            "--no-color",
        ],
    )

    assert result.stdout.splitlines() == [
        f"{ICON_RUNNING} Edit: src/main.rs | {ICON_COMPLETED} Read x2"
    ]


def test_render_broken_config_falls_back_to_defaults(
    cli_runner: CliRunner, session_transcript: Path, tmp_path: Path
) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("tools: [unclosed", encoding="utf-8")

    result = cli_runner.invoke(
        app,
        [
            "render",
            "--transcript",
            str(session_transcript),
            "--config",
            str(config_file),
            "--no-color",
        ],
    )

    assert result.exit_code == 0
    assert f"{ICON_RUNNING} Edit: src/main.rs | {ICON_COMPLETED} Read x2" in result.output


# =============================================================================
# inspect
# =============================================================================


def test_inspect_json(cli_runner: CliRunner, session_transcript: Path) -> None:
    """Test inspect --json prints the snapshot."""
    result = cli_runner.invoke(app, ["inspect", str(session_transcript), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [t["id"] for t in data["tools"]] == ["t1", "t2", "t3"]
    assert [t["status"] for t in data["tools"]] == ["completed", "completed", "running"]
    assert data["agents"][0]["agent_type"] == "Plan"
    assert data["session_start"] == "2025-01-15T10:00:00+00:00"


def test_inspect_tables(cli_runner: CliRunner, session_transcript: Path) -> None:
    """Test inspect renders tool and agent tables."""
    result = cli_runner.invoke(app, ["inspect", str(session_transcript)])

    assert result.exit_code == 0
    assert "Tools" in result.output
    assert "Agents" in result.output
    assert "Edit" in result.output
    assert "Plan" in result.output


def test_inspect_without_activity(cli_runner: CliRunner, transcript) -> None:
    path = transcript.record([{"type": "text", "text": "hello"}]).write()

    result = cli_runner.invoke(app, ["inspect", str(path)])

    assert result.exit_code == 0
    assert "No tool or agent activity" in result.output


def test_inspect_missing_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(app, ["inspect", str(tmp_path / "gone.jsonl")])

    assert result.exit_code == 1
    assert "Transcript not found" in result.output


# =============================================================================
# config
# =============================================================================


def test_config_init_writes_defaults(cli_runner: CliRunner, tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"

    result = cli_runner.invoke(app, ["config", "init", "--path", str(config_file)])

    assert result.exit_code == 0
    assert ActivityLinesConfig.load(config_file) == ActivityLinesConfig()


def test_config_init_default_location(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test config init writes under ~/.claude/activity-line by default."""
    result = cli_runner.invoke(app, ["config", "init"])

    assert result.exit_code == 0
    assert (tmp_path / "home" / ".claude" / "activity-line" / "config.yaml").exists()


def test_config_init_refuses_to_overwrite(cli_runner: CliRunner, tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("show_tools: false\n", encoding="utf-8")

    result = cli_runner.invoke(app, ["config", "init", "--path", str(config_file)])

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert config_file.read_text(encoding="utf-8") == "show_tools: false\n"


def test_config_init_force(cli_runner: CliRunner, tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("show_tools: false\n", encoding="utf-8")

    result = cli_runner.invoke(app, ["config", "init", "--path", str(config_file), "--force"])

    assert result.exit_code == 0
    assert ActivityLinesConfig.load(config_file).show_tools is True


def test_config_show(cli_runner: CliRunner, tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("show_agents: false\ntools:\n  max_running: 7\n", encoding="utf-8")

    result = cli_runner.invoke(app, ["config", "show", "--path", str(config_file)])

    assert result.exit_code == 0
    data = yaml.safe_load(result.stdout)
    assert data["show_agents"] is False
    assert data["tools"]["max_running"] == 7
    assert data["tools"]["tool_name_color"] == {"c16": 6}


def test_config_show_without_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(app, ["config", "show", "--path", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    assert "show_tools: true" in result.output


def test_config_show_uses_env_setting(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config_file = tmp_path / "env.yaml"
    config_file.write_text("show_tools: false\n", encoding="utf-8")
    monkeypatch.setenv("ACTIVITY_LINE_CONFIG_FILE", str(config_file))

    result = cli_runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout)["show_tools"] is False


# =============================================================================
# version
# =============================================================================


@pytest.mark.parametrize("args", [["version"], ["--version"]])
def test_version(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(app, args)

    assert result.exit_code == 0
    assert VERSION in result.output

"""Render command: print the activity lines for a session.

Meant to be run as (or from) a Claude Code status line command. Output is
written to stdout one line at a time; nothing is printed when the session
has no activity.
"""

import logging
from pathlib import Path

import typer

from activity_line.activity import render_activity_lines
from activity_line.config import get_settings, load_activity_config
from activity_line.constants import STATUSLINE_KEY_TRANSCRIPT_PATH
from activity_line.models.config import ActivityLinesConfig
from activity_line.utils import read_statusline_input

logger = logging.getLogger(__name__)


def _resolve_transcript(transcript: Path | None) -> str | None:
    if transcript is not None:
        return str(transcript)
    value = read_statusline_input().get(STATUSLINE_KEY_TRANSCRIPT_PATH)
    return value if isinstance(value, str) and value else None


def _apply_overrides(
    config: ActivityLinesConfig,
    no_color: bool,
    show_tools: bool | None,
    show_agents: bool | None,
) -> ActivityLinesConfig:
    if no_color:
        config = config.without_colors()
    update: dict[str, bool] = {}
    if show_tools is not None:
        update["show_tools"] = show_tools
    if show_agents is not None:
        update["show_agents"] = show_agents
    return config.model_copy(update=update) if update else config


def render_command(
    transcript: Path | None = None,
    config_file: Path | None = None,
    no_color: bool = False,
    show_tools: bool | None = None,
    show_agents: bool | None = None,
) -> None:
    """Render the tools and agents lines to stdout.

    Args:
        transcript: Transcript to read. When omitted, the status-line JSON on
            stdin provides ``transcript_path``.
        config_file: Rendering config; the configured default when omitted.
        no_color: Render plain text.
        show_tools: Override the config's ``show_tools``.
        show_agents: Override the config's ``show_agents``.
    """
    config = load_activity_config(config_file or get_settings().config_file)
    config = _apply_overrides(config, no_color, show_tools, show_agents)

    transcript_path = _resolve_transcript(transcript)
    if transcript_path is None:
        logger.debug("No transcript path given; nothing to render")
        return

    for line in render_activity_lines(transcript_path, config):
        # color=True keeps the escape codes when stdout is a pipe
        typer.echo(line, color=True)

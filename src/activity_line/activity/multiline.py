"""Multi-line coordinator for the activity lines.

Parses the transcript once and renders the enabled lines below the main
status line, tools first and then agents.
"""

import logging
from pathlib import Path

from activity_line.activity.agents_line import render_agents_line
from activity_line.activity.tools_line import render_tools_line
from activity_line.activity.transcript import parse_transcript_activity
from activity_line.models.activity import Clock, utc_now
from activity_line.models.config import ActivityLinesConfig

logger = logging.getLogger(__name__)


def max_line_count(config: ActivityLinesConfig) -> int:
    """Return how many activity lines the config can produce (0-2)."""
    return int(config.show_tools) + int(config.show_agents)


def render_activity_lines(
    transcript_path: str | Path | None,
    config: ActivityLinesConfig | None = None,
    clock: Clock = utc_now,
) -> list[str]:
    """Render the enabled activity lines for a transcript.

    Args:
        transcript_path: Path to the session's JSONL transcript.
        config: Which lines to show and how; defaults when omitted.
        clock: Source of the current time.

    Returns:
        Rendered lines in display order. Empty lines are left out, so the
        list is empty when there is no activity or nothing is enabled.
    """
    config = config or ActivityLinesConfig()
    if not transcript_path or max_line_count(config) == 0:
        return []

    snapshot = parse_transcript_activity(transcript_path, clock=clock)
    logger.debug(
        f"Parsed {len(snapshot.tools)} tools and {len(snapshot.agents)} agents "
        f"from {transcript_path}"
    )

    lines: list[str] = []
    if config.show_tools:
        tools_line = render_tools_line(snapshot, config.tools)
        if tools_line:
            lines.append(tools_line)
    if config.show_agents:
        agents_line = render_agents_line(snapshot, config.agents, clock=clock)
        if agents_line:
            lines.append(agents_line)
    return lines

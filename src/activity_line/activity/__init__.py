"""Transcript activity tracking and the tools/agents line renderers."""

from .agents_line import render_agents_line
from .formatting import format_duration, truncate_path, truncate_string
from .multiline import max_line_count, render_activity_lines
from .tools_line import render_tools_line
from .transcript import extract_target, parse_timestamp, parse_transcript_activity

__all__ = [
    "parse_transcript_activity",
    "parse_timestamp",
    "extract_target",
    "render_tools_line",
    "render_agents_line",
    "render_activity_lines",
    "max_line_count",
    "format_duration",
    "truncate_path",
    "truncate_string",
]

"""CLI commands for activity-line."""

from activity_line.commands.config_cmd import config_app
from activity_line.commands.inspect_cmd import inspect_command
from activity_line.commands.render_cmd import render_command

__all__ = [
    "config_app",
    "inspect_command",
    "render_command",
]

"""UI messages and strings for activity-line.

This module consolidates the user-facing messages of the CLI:
- Help text
- Success/error/info messages
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_NAME = "activity-line"
PROJECT_TAGLINE = "Tool and subagent activity for the Claude Code status line"

# =============================================================================
# Help
# =============================================================================

HELP_TEXT = f"""
[bold cyan]activity-line[/bold cyan] - {PROJECT_TAGLINE}

[bold]Commands:[/bold]
  [cyan]render[/cyan]      Print the activity lines for a session
  [cyan]inspect[/cyan]     Show the tools and agents tracked in a transcript
  [cyan]config[/cyan]      Show or create the rendering config
  [cyan]version[/cyan]     Show version information

[bold]Examples:[/bold]
  [dim]# Use as a Claude Code status line command (reads stdin)[/dim]
  [dim]$ activity-line render[/dim]

  [dim]# Render a transcript directly, without colors[/dim]
  [dim]$ activity-line render --transcript session.jsonl --no-color[/dim]
"""

# =============================================================================
# Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "config_created": "Config written to {path}",
}

ERROR_MESSAGES = {
    "generic_error": "An error occurred: {error}",
    "config_exists": "Config already exists at {path}. Use --force to overwrite.",
    "transcript_not_found": "Transcript not found: {path}",
}

INFO_MESSAGES = {
    "no_config": "No config file at {path}; showing defaults.",
    "no_activity": "No tool or agent activity in {path}",
}

"""Inspect command: show what the ingestor tracks in a transcript."""

import json
from pathlib import Path

import typer
from rich.table import Table

from activity_line.activity import format_duration, parse_transcript_activity
from activity_line.config.messages import ERROR_MESSAGES, INFO_MESSAGES
from activity_line.models.activity import ActivitySnapshot, utc_now
from activity_line.models.enums import AgentStatus, ToolStatus
from activity_line.utils import console, print_error, print_info

_TOOL_STATUS_STYLES = {
    ToolStatus.RUNNING: "[yellow]running[/yellow]",
    ToolStatus.COMPLETED: "[green]completed[/green]",
    ToolStatus.ERROR: "[red]error[/red]",
}
_AGENT_STATUS_STYLES = {
    AgentStatus.RUNNING: "[yellow]running[/yellow]",
    AgentStatus.COMPLETED: "[green]completed[/green]",
}


def _tools_table(snapshot: ActivitySnapshot) -> Table:
    now = utc_now()
    table = Table(title="Tools")
    table.add_column("ID", style="dim")
    table.add_column("Tool", style="cyan")
    table.add_column("Target")
    table.add_column("Status")
    table.add_column("Elapsed", justify="right")
    for tool in snapshot.tools:
        table.add_row(
            tool.id,
            tool.name,
            tool.target or "[dim]-[/dim]",
            _TOOL_STATUS_STYLES[tool.status],
            format_duration(tool.elapsed(now)),
        )
    return table


def _agents_table(snapshot: ActivitySnapshot) -> Table:
    now = utc_now()
    table = Table(title="Agents")
    table.add_column("ID", style="dim")
    table.add_column("Type", style="magenta")
    table.add_column("Model")
    table.add_column("Description")
    table.add_column("Status")
    table.add_column("Elapsed", justify="right")
    for agent in snapshot.agents:
        table.add_row(
            agent.id,
            agent.agent_type,
            agent.model or "[dim]-[/dim]",
            agent.description or "[dim]-[/dim]",
            _AGENT_STATUS_STYLES[agent.status],
            format_duration(agent.elapsed(now)),
        )
    return table


def inspect_command(transcript: Path, as_json: bool = False) -> None:
    """Print the tracked tools and agents of a transcript.

    Raises:
        typer.Exit: With code 1 if the transcript does not exist.
    """
    if not transcript.is_file():
        print_error(ERROR_MESSAGES["transcript_not_found"].format(path=transcript))
        raise typer.Exit(code=1)

    snapshot = parse_transcript_activity(transcript)

    if as_json:
        typer.echo(json.dumps(snapshot.to_dict(), indent=2))
        return

    if not snapshot.has_activity():
        print_info(INFO_MESSAGES["no_activity"].format(path=transcript))
        return

    session_elapsed = snapshot.session_elapsed(utc_now())
    if snapshot.session_start is not None and session_elapsed is not None:
        console.print(
            f"[bold]Session started:[/bold] {snapshot.session_start.isoformat()} "
            f"([dim]{format_duration(session_elapsed)} ago[/dim])"
        )
    if snapshot.tools:
        console.print(_tools_table(snapshot))
    if snapshot.agents:
        console.print(_agents_table(snapshot))

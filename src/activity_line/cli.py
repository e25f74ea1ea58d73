"""Main CLI entry point for activity-line."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from activity_line.commands import config_app, inspect_command, render_command
from activity_line.config import get_settings
from activity_line.config.messages import HELP_TEXT, PROJECT_NAME, PROJECT_TAGLINE
from activity_line.config.paths import DOTENV_FILENAME
from activity_line.constants import LOG_LEVEL_DEBUG, VERSION
from activity_line.utils import configure_logging, console, print_error, print_panel

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / DOTENV_FILENAME, verbose=False)

# Create main Typer app
app = typer.Typer(
    name=PROJECT_NAME,
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Add command groups
app.add_typer(config_app, name="config")


@app.command("render")
def render(
    transcript: Path | None = typer.Option(
        None,
        "--transcript",
        "-t",
        help="Transcript to render (defaults to transcript_path from stdin JSON)",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Rendering config file",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Render without ANSI colors",
    ),
    show_tools: bool | None = typer.Option(
        None,
        "--tools/--no-tools",
        help="Show or hide the tools line (overrides config)",
    ),
    show_agents: bool | None = typer.Option(
        None,
        "--agents/--no-agents",
        help="Show or hide the agents line (overrides config)",
    ),
) -> None:
    """Print the tools and agents activity lines.

    Reads Claude Code's status-line JSON from stdin unless --transcript is
    given, and prints nothing when the session has no activity.
    """
    render_command(
        transcript=transcript,
        config_file=config_file,
        no_color=no_color,
        show_tools=show_tools,
        show_agents=show_agents,
    )


@app.command("inspect")
def inspect_transcript(
    transcript: Path = typer.Argument(..., help="Path to a JSONL transcript"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the snapshot as JSON",
    ),
) -> None:
    """Show the tools and agents tracked in a transcript."""
    inspect_command(transcript, as_json=as_json)


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]{PROJECT_NAME}[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log at DEBUG level and show tracebacks",
    ),
) -> None:
    """activity-line - tool and subagent activity for the status line.

    Get started:
        activity-line render --transcript session.jsonl
        activity-line config init
    """
    settings = get_settings()
    configure_logging(
        LOG_LEVEL_DEBUG if debug else settings.get_effective_log_level(),
        log_file=settings.log_file,
        max_size_mb=settings.log_max_size_mb,
        backup_count=settings.log_backup_count,
    )

    # Handle version flag
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(HELP_TEXT)
        raise typer.Exit()


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running 'activity-line'.
    It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        # Check if it's a typer.Exit with code
        if isinstance(e, typer.Exit):
            sys.exit(e.exit_code)

        from activity_line.config.messages import ERROR_MESSAGES

        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))

        # Show traceback in debug mode
        if "--debug" in sys.argv:
            import traceback

            console.print("\n[dim]Traceback:[/dim]")
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    cli_main()

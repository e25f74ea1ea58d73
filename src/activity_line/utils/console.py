"""Rich console helpers for CLI messages.

Messages go to stderr: stdout is reserved for the rendered status lines.
"""

from rich.console import Console
from rich.panel import Panel

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")


def print_info(message: str) -> None:
    """Print an informational message."""
    err_console.print(f"[cyan]{message}[/cyan]")


def print_success(message: str) -> None:
    """Print a success message."""
    err_console.print(f"[green]✓[/green] {message}")


def print_panel(content: str, title: str | None = None, style: str = "cyan") -> None:
    """Print content in a bordered panel."""
    console.print(Panel(content, title=title, border_style=style))

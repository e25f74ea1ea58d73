"""Config commands: show or create the rendering config file."""

from pathlib import Path

import typer
import yaml

from activity_line.config import get_settings, load_activity_config, save_activity_config
from activity_line.config.messages import ERROR_MESSAGES, INFO_MESSAGES, SUCCESS_MESSAGES
from activity_line.models.config import ActivityLinesConfig
from activity_line.utils import print_error, print_info, print_success

config_app = typer.Typer(
    name="config",
    help="Show or create the rendering config",
    no_args_is_help=True,
)


@config_app.command("show")
def config_show(
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Config file (defaults to ~/.claude/activity-line/config.yaml)",
    ),
) -> None:
    """Print the effective rendering config as YAML."""
    config_file = path or get_settings().config_file
    if not config_file.exists():
        print_info(INFO_MESSAGES["no_config"].format(path=config_file))

    config = load_activity_config(config_file)
    typer.echo(
        yaml.safe_dump(
            config.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        nl=False,
    )


@config_app.command("init")
def config_init(
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Config file (defaults to ~/.claude/activity-line/config.yaml)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write the default rendering config."""
    config_file = path or get_settings().config_file
    if config_file.exists() and not force:
        print_error(ERROR_MESSAGES["config_exists"].format(path=config_file))
        raise typer.Exit(code=1)

    save_activity_config(ActivityLinesConfig(), config_file)
    print_success(SUCCESS_MESSAGES["config_created"].format(path=config_file))

# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from habitual import configuration
from habitual.repository.configuration import CONFIGURATION_REPO
from habitual.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("profile_name", config["profile_name"])
    table.add_row(
        "reminder_interval_seconds", str(config["reminder_interval_seconds"])
    )
    table.add_row("progress_bar_width", str(config["progress_bar_width"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] else f"None ({configuration.DATA_PATH})",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(__configuration_table())
    console.print(f"\nConfiguration file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    profile_name: Annotated[
        Optional[str],
        typer.Option("--profile-name", help="Display name shown on the profile"),
    ] = None,
    reminder_interval_seconds: Annotated[
        Optional[int],
        typer.Option(
            "--reminder-interval",
            min=1,
            help="Seconds between reminders in the interactive menu",
        ),
    ] = None,
    progress_bar_width: Annotated[
        Optional[int],
        typer.Option(
            "--progress-bar-width",
            min=5,
            help="Width of weekly progress bars in characters",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the report header",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing habits.json",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        profile_name=profile_name,
        reminder_interval_seconds=reminder_interval_seconds,
        progress_bar_width=progress_bar_width,
        show_header=show_header,
    )
    CONFIGURATION_REPO.flush()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__configuration_table("Updated Configuration"))

# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from habitual.logger import setup_logging
from habitual.terminal import configuration, habit
from habitual.terminal.custom_typer import OrderedAliasedTyperGroup
from habitual.terminal.menu import menu
from habitual.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="habitual - Weekly habit tracking in the CLI",
    no_args_is_help=True,
)
app.command(name="profile, p")(habit.profile)
app.command(name="list, ls")(habit.list_habits)
app.command(name="show, sh")(habit.show)
app.command(name="add, a", no_args_is_help=True)(habit.add)
app.command(name="complete, c", no_args_is_help=True)(habit.complete)
app.command(name="delete, d", no_args_is_help=True)(habit.delete)
app.command(name="stats, s")(habit.stats)
app.command(name="remind, r")(habit.remind)
app.command(name="reset")(habit.reset)
app.command(name="menu, m")(menu)
app.add_typer(configuration.app, name="config, cf", help="View or change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Show debug logging"),
    ] = False,
) -> None:
    """
    habitual - Weekly habit tracking in the CLI

    Global options that apply to all commands.
    """
    setup_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()

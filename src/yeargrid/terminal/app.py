# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from yeargrid.terminal import calendar, configuration
from yeargrid.terminal.custom_typer import OrderedAliasedTyperGroup
from yeargrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="yeargrid - Mark off the days of the year in the terminal",
    no_args_is_help=True,
)
app.command(name="show, s")(calendar.show)
app.command(name="done, d")(calendar.done)
app.command(name="undo, u")(calendar.undo)
app.command(name="toggle, t")(calendar.toggle)
app.command(name="status, st")(calendar.status)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Log storage activity",
        ),
    ] = False,
) -> None:
    """
    yeargrid - Mark off the days of the year in the terminal

    Global options that apply to all commands.
    """
    logging.getLogger("yeargrid").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()

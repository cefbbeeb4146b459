# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from yeargrid import configuration
from yeargrid.color import VALID_MARKED_COLORS, is_valid_marked_color
from yeargrid.repository.configuration import CONFIGURATION_REPO
from yeargrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _config_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "scope_marks_by_year",
        "✓ Enabled" if config["scope_marks_by_year"] else "✗ Disabled",
    )
    table.add_row("marked_color", config.get("marked_color", ""))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("marks_file", str(configuration.DATA_MARKS_PATH))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_config_table())


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the header above the calendar",
        ),
    ] = None,
    scope_marks_by_year: Annotated[
        Optional[bool],
        typer.Option(
            "--scope-by-year/--global-scope",
            help="Keep a separate set of marks per year, or one set for all years",
        ),
    ] = None,
    marked_color: Annotated[
        Optional[str],
        typer.Option(
            "--marked-color",
            help=f"Color for done days: {', '.join(VALID_MARKED_COLORS)}",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for the marks file (None = platform data directory)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to None (use platform data directory)",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    if marked_color is not None and not is_valid_marked_color(marked_color):
        raise typer.BadParameter(
            f"Invalid color: {marked_color}. Valid options: {', '.join(VALID_MARKED_COLORS)}",
            param_hint="--marked-color",
        )

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        scope_marks_by_year=scope_marks_by_year,
        marked_color=marked_color,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )
    CONFIGURATION_REPO.flush()
    configuration.load_data_path_configuration()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_config_table("Updated Configuration"))

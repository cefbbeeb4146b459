# SPDX-License-Identifier: MIT

from typing import NoReturn

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from yeargrid import configuration
from yeargrid import state as app_state
from yeargrid.color import MARKED_COLOR
from yeargrid.repository.configuration import CONFIGURATION_REPO
from yeargrid.repository.key_value import YamlKeyValueStore
from yeargrid.repository.mark import MarkPersistenceError, MarkStore
from yeargrid.service.today import (
    build_calendar_cells,
    get_marks_summary,
    mark_today,
    toggle_today,
    unmark_today,
)
from yeargrid.time import date_to_display_str
from yeargrid.view.calendar import calendar_view, status_view


def open_mark_store(today: pendulum.Date) -> MarkStore:
    config = CONFIGURATION_REPO.get_config()
    store = YamlKeyValueStore(configuration.DATA_MARKS_PATH)
    return MarkStore.for_year(store, today.year, config["scope_marks_by_year"])


def _show_calendar(today: pendulum.Date, mark_store: MarkStore) -> None:
    config = CONFIGURATION_REPO.get_config()
    cells = build_calendar_cells(today, mark_store)
    calendar_view(cells, today.year, config.get("marked_color", MARKED_COLOR))


def _not_saved(e: MarkPersistenceError) -> NoReturn:
    console = Console(stderr=True)
    console.print(f"[red]Not saved:[/red] {escape(str(e))}")
    raise typer.Exit(1)


def show() -> None:
    """Show this year's calendar."""
    today = app_state.get_clock()()
    _show_calendar(today, open_mark_store(today))


def done() -> None:
    """Mark today as done."""
    today = app_state.get_clock()()
    mark_store = open_mark_store(today)
    try:
        ordinal = mark_today(mark_store, lambda: today)
    except MarkPersistenceError as e:
        _not_saved(e)

    typer.echo(f"Done: {date_to_display_str(today)} (day {ordinal})")
    _show_calendar(today, mark_store)


def undo() -> None:
    """Remove today's mark."""
    today = app_state.get_clock()()
    mark_store = open_mark_store(today)
    try:
        ordinal = unmark_today(mark_store, lambda: today)
    except MarkPersistenceError as e:
        _not_saved(e)

    typer.echo(f"Undone: {date_to_display_str(today)} (day {ordinal})")
    _show_calendar(today, mark_store)


def toggle() -> None:
    """Flip today's mark."""
    today = app_state.get_clock()()
    mark_store = open_mark_store(today)
    try:
        is_marked = toggle_today(mark_store, lambda: today)
    except MarkPersistenceError as e:
        _not_saved(e)

    state = "done" if is_marked else "not done"
    typer.echo(f"{date_to_display_str(today)} is now {state}")
    _show_calendar(today, mark_store)


def status() -> None:
    """Show how many days are done and the current streak."""
    today = app_state.get_clock()()
    config = CONFIGURATION_REPO.get_config()
    status_view(
        get_marks_summary(today, open_mark_store(today)),
        config.get("marked_color", MARKED_COLOR),
    )

# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from yeargrid.color import MARKED_COLOR, MONTH_LABEL_COLOR, UNMARKED_COLOR
from yeargrid.model.calendar import CalendarCell, MarkSummary
from yeargrid.model.grid import WEEK_LENGTH
from yeargrid.service.calendar_grid import grid_shape, month_start_ordinals, position_of
from yeargrid.time import date_to_display_str
from yeargrid.view.header import header

CELL_SYMBOL = "■"
TODAY_SYMBOL = "◆"
PADDING_SYMBOL = " "
CELL_WIDTH = 2


def get_cell_symbol(cell: CalendarCell, marked_color: str) -> tuple[str, str]:
    """
    Get the symbol and style for a calendar cell.

    Returns:
        Tuple of (symbol, style)
    """
    if cell["is_padding"]:
        return (PADDING_SYMBOL, "")

    symbol = TODAY_SYMBOL if cell["is_today"] else CELL_SYMBOL
    if cell["is_marked"]:
        return (symbol, marked_color)
    return (symbol, UNMARKED_COLOR)


def build_month_label_row(year: int) -> Text:
    """Month names placed above the grid column holding each month's first day."""
    width = grid_shape(year)["rows"] * CELL_WIDTH
    label_row = [" "] * width
    next_free = 0

    for month_name, ordinal in month_start_ordinals(year):
        start = position_of(ordinal, year)["row"] * CELL_WIDTH
        start = max(start, next_free)
        if start + len(month_name) > width:
            break
        label_row[start : start + len(month_name)] = list(month_name)
        next_free = start + len(month_name) + 1

    return Text("".join(label_row).rstrip(), style=MONTH_LABEL_COLOR)


def build_grid_rows(cells: list[CalendarCell], marked_color: str) -> list[Text]:
    """
    Lay the cells out as terminal lines.

    Each grid row (seven consecutive ordinals) is drawn top to bottom as one
    terminal column, so the year reads left to right in 7 lines.
    """
    lines = [Text() for _ in range(WEEK_LENGTH)]
    for cell in cells:
        symbol, style = get_cell_symbol(cell, marked_color)
        line = lines[cell["position"]["column"]]
        if style:
            line.append(symbol, style=style)
        else:
            line.append(symbol)
        line.append(" " * (CELL_WIDTH - 1))
    for line in lines:
        line.rstrip()
    return lines


def calendar_view(
    cells: list[CalendarCell],
    year: int,
    marked_color: str = MARKED_COLOR,
) -> None:
    marked_count = len([c for c in cells if c["is_marked"]])
    header(str(year), f"{marked_count} days done")

    console = Console()
    console.print()
    console.print(build_month_label_row(year), soft_wrap=True)
    for line in build_grid_rows(cells, marked_color):
        console.print(line, soft_wrap=True)
    console.print()


def get_today_done_text(is_today_marked: bool, marked_color: str) -> str:
    if is_today_marked:
        return f"[{marked_color}]✓ Done[/{marked_color}]"
    return "✗ Not yet"


def build_status_table(summary: MarkSummary, marked_color: str) -> Table:
    status_table = Table(box=box.SIMPLE)
    status_table.add_column("property")
    status_table.add_column("value")

    status_table.add_row("today", date_to_display_str(summary["today"]))
    status_table.add_row(
        "today done", get_today_done_text(summary["is_today_marked"], marked_color)
    )
    status_table.add_row(
        "days done", f"{summary['marked_count']} / {summary['year_length']}"
    )
    status_table.add_row("current streak", str(summary["current_streak"]))
    return status_table


def status_view(summary: MarkSummary, marked_color: str = MARKED_COLOR) -> None:
    header(str(summary["year"]), "status")

    console = Console()
    console.print(build_status_table(summary, marked_color))

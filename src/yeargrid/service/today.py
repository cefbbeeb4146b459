# SPDX-License-Identifier: MIT

import pendulum

from yeargrid.model.calendar import CalendarCell, MarkSummary
from yeargrid.model.grid import Ordinal
from yeargrid.repository.mark import MarkStore
from yeargrid.service.calendar_grid import (
    date_of,
    is_padding,
    ordinal_of,
    padded_cell_count,
    position_of,
    year_length,
)
from yeargrid.time import Clock

# Only today's cell can be changed. None of these take an ordinal.


def mark_today(mark_store: MarkStore, clock: Clock) -> Ordinal:
    ordinal = ordinal_of(clock())
    mark_store.mark(ordinal)
    return ordinal


def unmark_today(mark_store: MarkStore, clock: Clock) -> Ordinal:
    ordinal = ordinal_of(clock())
    mark_store.unmark(ordinal)
    return ordinal


def toggle_today(mark_store: MarkStore, clock: Clock) -> bool:
    return mark_store.toggle(ordinal_of(clock()))


def build_calendar_cells(
    today: pendulum.Date, mark_store: MarkStore
) -> list[CalendarCell]:
    """
    Describe every cell of today's year grid, padding included, in index order.

    Padding cells never report as marked, whatever the store holds.
    """
    year = today.year
    today_ordinal = ordinal_of(today)
    cells: list[CalendarCell] = []

    for ordinal in range(1, padded_cell_count(year) + 1):
        padding = is_padding(ordinal, year)
        cells.append(
            {
                "ordinal": ordinal,
                "position": position_of(ordinal, year),
                "date": None if padding else date_of(ordinal, year),
                "is_padding": padding,
                "is_marked": not padding and mark_store.contains(ordinal),
                "is_today": ordinal == today_ordinal,
            }
        )

    return cells


def get_current_streak(today: pendulum.Date, mark_store: MarkStore) -> int:
    """
    Count consecutive marked days ending today.

    An unmarked today does not break a streak that ran through yesterday.
    """
    ordinal = ordinal_of(today)
    if not mark_store.contains(ordinal):
        ordinal -= 1

    streak = 0
    while ordinal >= 1 and mark_store.contains(ordinal):
        streak += 1
        ordinal -= 1
    return streak


def get_marks_summary(today: pendulum.Date, mark_store: MarkStore) -> MarkSummary:
    length = year_length(today)
    marked_count = len([m for m in mark_store.marks if m <= length])
    return {
        "year": today.year,
        "today": today,
        "year_length": length,
        "marked_count": marked_count,
        "is_today_marked": mark_store.contains(ordinal_of(today)),
        "current_streak": get_current_streak(today, mark_store),
    }

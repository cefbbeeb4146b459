# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from yeargrid.model.grid import GridPosition, Ordinal


class CalendarCell(TypedDict):
    ordinal: Ordinal
    position: GridPosition
    date: Optional[pendulum.Date]  # None for padding cells
    is_padding: bool
    is_marked: bool
    is_today: bool


class MarkSummary(TypedDict):
    year: int
    today: pendulum.Date
    year_length: int
    marked_count: int
    is_today_marked: bool
    current_streak: int

# SPDX-License-Identifier: MIT

from typing import Optional, Union

import pendulum

from yeargrid.model.grid import WEEK_LENGTH, GridPosition, GridShape, Ordinal

DateOrYear = Union[pendulum.Date, int]

# Largest padded cell count of any year (366 rounded up to a multiple of 7)
MAX_CELL_COUNT = 371


def _year_of(date_or_year: DateOrYear) -> int:
    if isinstance(date_or_year, int):
        return date_or_year
    return date_or_year.year


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_length(date_or_year: DateOrYear) -> int:
    """Number of days in the calendar year containing the given date."""
    return 366 if is_leap_year(_year_of(date_or_year)) else 365


def padded_cell_count(date_or_year: DateOrYear) -> int:
    """
    Number of grid cells needed for the year, padded so that every row is full.

    A year length that is already a multiple of the row width gets no extra
    padding row.
    """
    length = year_length(date_or_year)
    return ((length + WEEK_LENGTH - 1) // WEEK_LENGTH) * WEEK_LENGTH


def grid_shape(date_or_year: DateOrYear) -> GridShape:
    cell_count = padded_cell_count(date_or_year)
    return {
        "columns": WEEK_LENGTH,
        "rows": cell_count // WEEK_LENGTH,
        "cell_count": cell_count,
    }


def ordinal_of(date: pendulum.Date) -> Ordinal:
    """1-based day of year (Jan 1 -> 1)."""
    return date.day_of_year


def date_of(ordinal: Ordinal, year: int) -> pendulum.Date:
    """Inverse of ordinal_of for a real (non-padding) day of the given year."""
    if not 1 <= ordinal <= year_length(year):
        raise ValueError(
            f"{date_of.__name__}: ordinal {ordinal} is not a day of {year} "
            f"(1..{year_length(year)})"
        )
    return pendulum.date(year, 1, 1).add(days=ordinal - 1)


def _check_cell_ordinal(caller: str, ordinal: Ordinal, cell_count: int) -> None:
    if not 1 <= ordinal <= cell_count:
        raise ValueError(
            f"{caller}: ordinal {ordinal} is outside the grid (1..{cell_count})"
        )


def position_of(
    ordinal: Ordinal, date_or_year: Optional[DateOrYear] = None
) -> GridPosition:
    """
    Map an ordinal to its grid cell.

    Without a date the ordinal is checked against the largest grid of any
    year.
    """
    cell_count = (
        MAX_CELL_COUNT if date_or_year is None else padded_cell_count(date_or_year)
    )
    _check_cell_ordinal(position_of.__name__, ordinal, cell_count)

    index = ordinal - 1
    return {"row": index // WEEK_LENGTH, "column": index % WEEK_LENGTH}


def ordinal_at(position: GridPosition) -> Ordinal:
    """Inverse of position_of."""
    row = position["row"]
    column = position["column"]
    if row < 0 or not 0 <= column < WEEK_LENGTH:
        raise ValueError(f"{ordinal_at.__name__}: invalid position {position}")
    return row * WEEK_LENGTH + column + 1


def is_padding(ordinal: Ordinal, date_or_year: DateOrYear) -> bool:
    """True for cells past the last real day of the year."""
    _check_cell_ordinal(
        is_padding.__name__, ordinal, padded_cell_count(date_or_year)
    )
    return ordinal > year_length(date_or_year)


def month_start_ordinals(year: int) -> list[tuple[str, Ordinal]]:
    """Short month name and the ordinal of its first day, for each month."""
    starts: list[tuple[str, Ordinal]] = []
    for month in range(1, 13):
        first_day = pendulum.date(year, month, 1)
        starts.append((first_day.format("MMM"), ordinal_of(first_day)))
    return starts

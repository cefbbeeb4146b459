# SPDX-License-Identifier: MIT

from typing import Callable

import pendulum

# Injectable "current date" provider. Everything that needs today's date
# takes one of these instead of reading the wall clock itself.
Clock = Callable[[], pendulum.Date]


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def fixed_clock(year: int, month: int, day: int) -> Clock:
    """Return a clock that always reports the given local date."""
    value = pendulum.date(year, month, day)

    def clock() -> pendulum.Date:
        return value

    return clock


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")

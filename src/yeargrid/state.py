# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from yeargrid.time import Clock, today_local

_clock: ContextVar[Clock] = ContextVar("clock", default=today_local)


def set_clock(value: Clock) -> None:
    _clock.set(value)


def get_clock() -> Clock:
    return _clock.get()

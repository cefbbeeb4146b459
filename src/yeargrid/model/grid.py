# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

# 1-based day-of-year index (1 = Jan 1)
Ordinal: TypeAlias = int

WEEK_LENGTH = 7


class GridShape(TypedDict):
    columns: int
    rows: int
    cell_count: int


class GridPosition(TypedDict):
    row: int
    column: int

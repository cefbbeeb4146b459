# SPDX-License-Identifier: MIT

import unittest

import pendulum

from yeargrid.repository.key_value import MemoryKeyValueStore
from yeargrid.repository.mark import GLOBAL_SCOPE_KEY, MarkStore
from yeargrid.service.today import (
    build_calendar_cells,
    get_current_streak,
    get_marks_summary,
    mark_today,
    toggle_today,
    unmark_today,
)
from yeargrid.time import fixed_clock


class TodayActionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryKeyValueStore()
        self.mark_store = MarkStore.for_year(self.store, 2024)
        # 2024-04-09 is day 100 of the leap year
        self.clock = fixed_clock(2024, 4, 9)

    def test_mark_today(self) -> None:
        self.assertEqual(mark_today(self.mark_store, self.clock), 100)
        self.assertEqual(self.store.get("marked_days_2024"), [100])

    def test_unmark_today(self) -> None:
        self.mark_store.mark(99)
        self.mark_store.mark(100)
        self.assertEqual(unmark_today(self.mark_store, self.clock), 100)
        self.assertEqual(self.mark_store.get_all_marks(), [99])

    def test_toggle_today(self) -> None:
        self.assertTrue(toggle_today(self.mark_store, self.clock))
        self.assertTrue(self.mark_store.contains(100))
        self.assertFalse(toggle_today(self.mark_store, self.clock))
        self.assertFalse(self.mark_store.contains(100))

    def test_only_today_changes(self) -> None:
        mark_today(self.mark_store, self.clock)
        mark_today(self.mark_store, fixed_clock(2024, 4, 10))
        self.assertEqual(self.mark_store.get_all_marks(), [100, 101])


class CalendarCellTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryKeyValueStore()
        self.today = pendulum.date(2023, 6, 1)
        self.mark_store = MarkStore.for_year(self.store, 2023, scope_by_year=False)

    def test_one_cell_per_padded_slot(self) -> None:
        cells = build_calendar_cells(self.today, self.mark_store)
        self.assertEqual(len(cells), 371)
        self.assertEqual([c["ordinal"] for c in cells], list(range(1, 372)))
        self.assertEqual(cells[0]["date"], pendulum.date(2023, 1, 1))
        self.assertEqual(cells[364]["date"], pendulum.date(2023, 12, 31))
        self.assertEqual(cells[7]["position"], {"row": 1, "column": 0})

    def test_padding_cells_are_never_marked(self) -> None:
        # A global scope can hold day 366 from a leap year
        self.store.set(GLOBAL_SCOPE_KEY, [1, 366])
        cells = build_calendar_cells(self.today, self.mark_store)

        padding = [c for c in cells if c["is_padding"]]
        self.assertEqual([c["ordinal"] for c in padding], list(range(366, 372)))
        for cell in padding:
            self.assertIsNone(cell["date"])
            self.assertFalse(cell["is_marked"])
        self.assertTrue(cells[0]["is_marked"])

    def test_today_cell(self) -> None:
        cells = build_calendar_cells(self.today, self.mark_store)
        today_cells = [c for c in cells if c["is_today"]]
        self.assertEqual(len(today_cells), 1)
        self.assertEqual(today_cells[0]["date"], self.today)
        self.assertEqual(today_cells[0]["ordinal"], 152)


class SummaryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryKeyValueStore({"marked_days_2024": [10, 98, 99, 100]})
        self.mark_store = MarkStore.for_year(self.store, 2024)

    def test_streak_ending_today(self) -> None:
        self.assertEqual(get_current_streak(pendulum.date(2024, 4, 9), self.mark_store), 3)

    def test_unmarked_today_keeps_yesterdays_streak(self) -> None:
        self.assertEqual(get_current_streak(pendulum.date(2024, 4, 10), self.mark_store), 3)

    def test_broken_streak(self) -> None:
        self.assertEqual(get_current_streak(pendulum.date(2024, 4, 11), self.mark_store), 0)

    def test_streak_stops_at_new_year(self) -> None:
        mark_store = MarkStore.for_year(MemoryKeyValueStore(), 2024)
        mark_store.mark(1)
        mark_store.mark(2)
        self.assertEqual(get_current_streak(pendulum.date(2024, 1, 2), mark_store), 2)

    def test_summary(self) -> None:
        summary = get_marks_summary(pendulum.date(2024, 4, 9), self.mark_store)
        self.assertEqual(summary["year"], 2024)
        self.assertEqual(summary["year_length"], 366)
        self.assertEqual(summary["marked_count"], 4)
        self.assertTrue(summary["is_today_marked"])
        self.assertEqual(summary["current_streak"], 3)

    def test_summary_ignores_days_past_year_end(self) -> None:
        store = MemoryKeyValueStore({GLOBAL_SCOPE_KEY: [1, 366]})
        mark_store = MarkStore.for_year(store, 2023, scope_by_year=False)
        summary = get_marks_summary(pendulum.date(2023, 1, 1), mark_store)
        self.assertEqual(summary["marked_count"], 1)
        self.assertEqual(summary["year_length"], 365)


if __name__ == "__main__":
    unittest.main()

# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Any, Optional

from yeargrid.model.grid import Ordinal
from yeargrid.model.key_value import KeyValueStore, KeyValueStoreError
from yeargrid.service.calendar_grid import year_length

logger = logging.getLogger(__name__)

GLOBAL_SCOPE_KEY = "marked_days"
MAX_ORDINAL = 366


class MarkPersistenceError(KeyValueStoreError):
    """Raised when a mark change could not be written to the store."""

    pass


def scope_key_for_year(year: int, scope_by_year: bool = True) -> str:
    if not scope_by_year:
        return GLOBAL_SCOPE_KEY
    return f"{GLOBAL_SCOPE_KEY}_{year}"


class MarkStore:
    """
    The set of marked ordinals stored under one key of a key-value store.

    Reads happen once, on first access. Every mutation rewrites the whole set
    before returning, so the store always matches memory after a successful
    call.
    """

    def __init__(
        self,
        store: KeyValueStore,
        scope_key: str = GLOBAL_SCOPE_KEY,
        max_ordinal: int = MAX_ORDINAL,
    ) -> None:
        self.store = store
        self.scope_key = scope_key
        self.max_ordinal = max_ordinal
        self._marks: Optional[set[Ordinal]] = None
        self._lock = threading.RLock()

    @classmethod
    def for_year(
        cls, store: KeyValueStore, year: int, scope_by_year: bool = True
    ) -> "MarkStore":
        if scope_by_year:
            return cls(store, scope_key_for_year(year), year_length(year))
        return cls(store, GLOBAL_SCOPE_KEY, MAX_ORDINAL)

    @property
    def marks(self) -> set[Ordinal]:
        if self._marks is None:
            self.load()
        if self._marks is None:
            raise ValueError()
        return self._marks

    def load(self) -> set[Ordinal]:
        """
        Read the marks from the store, replacing anything held in memory.

        Absent, unreadable or malformed data gives an empty set.
        """
        with self._lock:
            self._marks = self.__read_marks()
            return set(self._marks)

    def __read_marks(self) -> set[Ordinal]:
        try:
            value = self.store.get(self.scope_key)
        except KeyValueStoreError as e:
            logger.warning("Could not read marks for %s: %s", self.scope_key, e)
            return set()

        if value is None:
            return set()
        if not self.__is_valid_value(value):
            logger.warning(
                "Ignoring malformed marks for %s: %r", self.scope_key, value
            )
            return set()
        return set(value)

    def __is_valid_value(self, value: Any) -> bool:
        if not isinstance(value, list):
            return False
        return all(self.__is_valid_ordinal(member) for member in value)

    def __is_valid_ordinal(self, ordinal: Any) -> bool:
        # bool is an int subclass but never a day
        return (
            isinstance(ordinal, int)
            and not isinstance(ordinal, bool)
            and 1 <= ordinal <= self.max_ordinal
        )

    def __check_ordinal(self, ordinal: Ordinal) -> None:
        if not self.__is_valid_ordinal(ordinal):
            raise ValueError(
                f"{MarkStore.__name__}: ordinal {ordinal!r} is outside 1..{self.max_ordinal}"
            )

    def __save_marks(self, marks: set[Ordinal]) -> None:
        try:
            self.store.set(self.scope_key, sorted(marks))
        except KeyValueStoreError as e:
            raise MarkPersistenceError(
                f"marks for {self.scope_key} were changed but not saved: {e}"
            ) from e

    def contains(self, ordinal: Ordinal) -> bool:
        return ordinal in self.marks

    def mark(self, ordinal: Ordinal) -> None:
        self.__check_ordinal(ordinal)
        with self._lock:
            marks = self.marks
            marks.add(ordinal)
            self.__save_marks(marks)
        logger.debug("Marked %s in %s", ordinal, self.scope_key)

    def unmark(self, ordinal: Ordinal) -> None:
        self.__check_ordinal(ordinal)
        with self._lock:
            marks = self.marks
            marks.discard(ordinal)
            self.__save_marks(marks)
        logger.debug("Unmarked %s in %s", ordinal, self.scope_key)

    def toggle(self, ordinal: Ordinal) -> bool:
        """Flip the mark on ordinal and return whether it is now marked."""
        self.__check_ordinal(ordinal)
        with self._lock:
            marks = self.marks
            if ordinal in marks:
                marks.discard(ordinal)
                is_marked = False
            else:
                marks.add(ordinal)
                is_marked = True
            self.__save_marks(marks)
        logger.debug("Toggled %s in %s to %s", ordinal, self.scope_key, is_marked)
        return is_marked

    def get_all_marks(self) -> list[Ordinal]:
        return sorted(self.marks)

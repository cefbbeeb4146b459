# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from yeargrid.model.key_value import KeyValueStoreError

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class YamlKeyValueStore:
    """
    Key-value store kept as a single YAML mapping in one file.

    A missing file means every key is absent. Every set rewrites the whole
    file; a file that cannot be read is moved aside first.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def __load_data(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}

        try:
            data = load(self.path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise KeyValueStoreError(f"cannot read {self.path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise KeyValueStoreError(
                f"{self.path} does not contain a mapping (found {type(data).__name__})"
            )
        return data

    def __save_data(self, data: dict[str, Any]) -> None:
        try:
            self.path.write_text(dump(data, Dumper=Dumper))
        except (OSError, YAMLError) as e:
            raise KeyValueStoreError(f"cannot write {self.path}: {e}") from e

    def __backup_unreadable(self) -> None:
        backup_path = self.path.with_name(self.path.name + BACKUP_SUFFIX)
        try:
            self.path.replace(backup_path)
        except OSError as e:
            raise KeyValueStoreError(
                f"cannot move unreadable {self.path} aside: {e}"
            ) from e
        logger.warning("Moved unreadable store %s to %s", self.path, backup_path)

    def get(self, key: str) -> Optional[Any]:
        return self.__load_data().get(key)

    def set(self, key: str, value: Any) -> None:
        try:
            data = self.__load_data()
        except KeyValueStoreError:
            self.__backup_unreadable()
            data = {}

        data[key] = value
        self.__save_data(data)
        logger.debug("Wrote key %s to %s", key, self.path)


class MemoryKeyValueStore:
    """Dict backed store, for tests and dry runs."""

    def __init__(self, initial: Optional[dict[str, Any]] = None) -> None:
        self._data: dict[str, Any] = deepcopy(initial) if initial else {}

    def get(self, key: str) -> Optional[Any]:
        return deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = deepcopy(value)

# SPDX-License-Identifier: MIT

from typing import Any, Optional, Protocol


class KeyValueStoreError(Exception):
    """Raised when a key-value store cannot be read or written."""

    pass


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[Any]:
        """
        Return the value stored under key, or None when the key is absent.

        Raises KeyValueStoreError when the underlying medium is unreadable.
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """
        Store value under key.

        Raises KeyValueStoreError when the write does not succeed.
        """
        ...

# SPDX-License-Identifier: MIT

import atexit

from yeargrid.repository.configuration import CONFIGURATION_REPO


def flush_and_sync() -> None:
    # Marks are written on every change, only settings can be left dirty
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)

# SPDX-License-Identifier: MIT

import logging

from yeargrid.cleanup import register_cleanup
from yeargrid.initialize import initialize
from yeargrid.terminal.app import run


def main() -> None:
    logging.basicConfig(format="%(levelname)s: %(name)s: %(message)s")
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()

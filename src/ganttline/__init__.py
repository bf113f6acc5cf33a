# SPDX-License-Identifier: MIT

from ganttline.cleanup import register_cleanup
from ganttline.initialize import initialize
from ganttline.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()

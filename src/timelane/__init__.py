# SPDX-License-Identifier: MIT

from timelane.cleanup import register_cleanup
from timelane.initialize import initialize
from timelane.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()

"""
2048 board scanner entry point.
Waits for the operator to focus the game, reads the board once, prints it.
"""

import sys

from scanner_2048.board_vision import BoardScanner, print_board
from scanner_2048.screen import ScreenAccessError


def wait_for_focus(delay: float) -> None:
    print(
        "Make sure the 2048 window is visible and active.\n"
        f"Reading the board in {delay:g}s; the mouse pointer will move over each tile.",
        file=sys.stderr,
    )


def main() -> int:
    scanner = BoardScanner()
    wait_for_focus(scanner.config.warmup_delay)
    try:
        grid = scanner.scan()
    except ScreenAccessError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nStopped by user.", file=sys.stderr)
        return 130

    print_board(grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())

import sys
import time
from typing import Dict, Tuple

import numpy as np

from scanner_2048.board_vision import TILE_COLORS, classify_color, closest_tile_value
from scanner_2048.screen import Screen, ScreenAccessError, acquire_screen


def sample_color_around_mouse(gui, box_size: int = 18) -> Tuple[float, float, float]:
    """Sample a small square around the mouse and return mean RGB."""
    x, y = gui.position()
    half = box_size // 2
    left = x - half
    top = y - half
    shot = gui.screenshot(region=(left, top, box_size, box_size))
    arr = np.array(shot)
    if arr.shape[2] == 4:
        arr = arr[:, :, :3]
    mean = arr.mean(axis=(0, 1))
    r, g, b = float(mean[0]), float(mean[1]), float(mean[2])
    return r, g, b


def describe_pixel(screen: Screen, x: int, y: int) -> Dict[str, object]:
    """Exact pixel at (x, y), what the scanner would read there, and the nearest palette color."""
    rgb = screen.pixel(x, y)
    nearest, dist = closest_tile_value(rgb, TILE_COLORS)
    exact = classify_color(rgb, TILE_COLORS)
    return {
        "rgb": rgb,
        "value": exact,
        "matched": tuple(rgb) in {tuple(c) for c in TILE_COLORS.values()},
        "nearest": nearest,
        "distance": dist,
    }


def main() -> int:
    try:
        screen = acquire_screen()
    except ScreenAccessError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    import pyautogui

    print(
        "2048 color probe\n"
        "- Move your mouse over a tile sample point.\n"
        "- Press Enter to sample the color at the cursor.\n"
        "- Ctrl+C to quit.\n"
    )

    while True:
        try:
            input("Hover over target tile and press Enter...")
            x, y = pyautogui.position()
            info = describe_pixel(screen, x, y)
            r, g, b = info["rgb"]
            if info["matched"]:
                print(f"({x}, {y}) RGB=({r}, {g}, {b}) -> {info['value']}")
            else:
                print(
                    f"({x}, {y}) RGB=({r}, {g}, {b}) -> unknown, reads as 0 "
                    f"(nearest={info['nearest']}, dist²={info['distance']:.0f})"
                )
            mr, mg, mb = sample_color_around_mouse(pyautogui)
            print(f"  patch mean RGB≈({mr:.1f}, {mg:.1f}, {mb:.1f})")
            time.sleep(0.2)
        except KeyboardInterrupt:
            print("\nExiting color probe.")
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())

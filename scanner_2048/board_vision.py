"""
Board reading for 2048.
Fixed sample points, exact color matching against TILE_COLORS,
and read_board() that returns a 4x4 grid of tile values.
"""

import sys
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, TextIO, Tuple

from scanner_2048.screen import RGB, Screen, acquire_screen


BOARD_SIZE = 4

Grid = List[List[int]]

# Order matters: classification takes the first exact match.
TILE_COLORS: Mapping[int, RGB] = MappingProxyType({
    0: (193, 179, 163),
    2: (234, 222, 209),
    4: (233, 218, 187),
    8: (239, 162, 98),
    16: (243, 129, 76),
    32: (244, 101, 72),
    64: (244, 69, 38),
    128: (233, 200, 89),
    256: (233, 196, 70),
})


@dataclass
class ScanConfig:
    origin_x: int = 490
    origin_y: int = 380
    cell_width: int = 120
    cell_height: int = 120
    board_size: int = BOARD_SIZE
    warmup_delay: float = 2.0  # seconds to bring the game window to front
    sample_delay: float = 0.01
    palette: Mapping[int, RGB] = field(default_factory=lambda: TILE_COLORS)

    def sample_point(self, col: int, row: int) -> Tuple[int, int]:
        return (
            self.origin_x + self.cell_width * col,
            self.origin_y + self.cell_height * row,
        )


def classify_color(rgb: RGB, palette: Mapping[int, RGB] = TILE_COLORS) -> int:
    """Tile value for an exact palette color; 0 when the color is unknown."""
    for val, color in palette.items():
        if tuple(rgb) == tuple(color):
            return val
    return 0


def closest_tile_value(
    rgb: Tuple[float, float, float], palette: Mapping[int, RGB] = TILE_COLORS
) -> Tuple[int, float]:
    r, g, b = rgb
    best_val = 0
    best_dist = float("inf")
    for val, (tr, tg, tb) in palette.items():
        dr = r - tr
        dg = g - tg
        db = b - tb
        dist = dr * dr + dg * dg + db * db
        if dist < best_dist:
            best_dist = dist
            best_val = val
    return best_val, best_dist


def read_board(
    screen: Screen,
    config: Optional[ScanConfig] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Grid:
    if config is None:
        config = ScanConfig()
    size = config.board_size
    grid: Grid = [[0] * size for _ in range(size)]

    # Column-major walk; the pointer has to sit on the sample point for the read.
    for x in range(size):
        for y in range(size):
            sleep(config.sample_delay)
            px, py = config.sample_point(x, y)
            screen.move_pointer(px, py)
            rgb = screen.pixel(px, py)
            grid[y][x] = classify_color(rgb, config.palette)
    return grid


def format_board(grid: Grid) -> str:
    lines = ["Result:"]
    for row in grid:
        lines.append("".join(f"{v}\t" for v in row))
    return "\n".join(lines) + "\n"


def print_board(grid: Grid, stream: Optional[TextIO] = None) -> None:
    if stream is None:
        stream = sys.stdout
    stream.write(format_board(grid))
    stream.flush()


class BoardScanner:
    """
    Warm up, grab the screen, then sample every cell once.

    screen_factory is called after the warm-up delay so the operator has time
    to focus the game window; a ScreenAccessError from it ends the scan before
    any pixel is read.
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        screen_factory: Callable[[], Screen] = acquire_screen,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config if config is not None else ScanConfig()
        self.screen_factory = screen_factory
        self.sleep = sleep

    def scan(self) -> Grid:
        self.sleep(self.config.warmup_delay)
        screen = self.screen_factory()
        return read_board(screen, self.config, self.sleep)

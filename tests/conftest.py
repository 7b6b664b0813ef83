import pytest

from scanner_2048.board_vision import TILE_COLORS
from scanner_2048.screen import Screen

EMPTY = TILE_COLORS[0]


class FakeScreen(Screen):
    """Scripted screen: colors keyed by (x, y), everything else reads as `default`."""

    def __init__(self, colors=None, default=EMPTY):
        self.colors = dict(colors or {})
        self.default = default
        self.pointer = None
        self.moves = []
        self.reads = []

    def move_pointer(self, x, y):
        self.pointer = (x, y)
        self.moves.append((x, y))

    def pixel(self, x, y):
        assert self.pointer == (x, y), "pixel read before pointer reached the sample point"
        self.reads.append((x, y))
        return self.colors.get((x, y), self.default)


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def fake_screen():
    return FakeScreen()


@pytest.fixture
def sleep():
    return RecordingSleep()

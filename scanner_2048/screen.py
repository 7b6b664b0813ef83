"""
Screen access for the scanner: pointer movement and pixel reads.
The real backend is pyautogui; tests pass their own Screen.
"""

import abc
from typing import Tuple


RGB = Tuple[int, int, int]


class ScreenAccessError(RuntimeError):
    """Pointer control or pixel reads are not available on this display."""


class Screen(abc.ABC):
    @abc.abstractmethod
    def move_pointer(self, x: int, y: int) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def pixel(self, x: int, y: int) -> RGB:
        raise NotImplementedError


class PyAutoGuiScreen(Screen):
    def __init__(self, backend):
        self._gui = backend
        # The scanner does its own throttling between samples.
        self._gui.PAUSE = 0

    def move_pointer(self, x: int, y: int) -> None:
        self._gui.moveTo(x, y)

    def pixel(self, x: int, y: int) -> RGB:
        color = self._gui.pixel(x, y)
        r, g, b = color[0], color[1], color[2]
        return int(r), int(g), int(b)


def acquire_screen() -> Screen:
    """
    Import pyautogui and make sure it can talk to the display.
    Raises ScreenAccessError when it can't (no DISPLAY, missing accessibility
    permission, no screenshot backend).
    """
    try:
        import pyautogui

        pyautogui.size()
        # One read under the pointer; the scan needs pixel access, not just the pointer.
        pyautogui.pixel(*pyautogui.position())
    except Exception as e:
        raise ScreenAccessError(f"cannot access pointer/screen: {e}") from e
    return PyAutoGuiScreen(pyautogui)

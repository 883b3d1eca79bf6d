"""Stored mouse and window-focus state."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple


class Button(IntEnum):
    """Mouse buttons, including the wheel directions."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    SIDE1 = 3
    SIDE2 = 4
    WHEEL_UP = 5
    WHEEL_DOWN = 6


class InputState:
    """Holds the current mouse position, button states and window focus."""

    def __init__(self, scale_factor: float = 1.0) -> None:
        if scale_factor <= 0:
            raise ValueError("scale factor must be positive")
        self.scale_factor = scale_factor
        self.window_focused = True
        self._buttons: List[bool] = [False] * len(Button)
        self._mouse_x = 0
        self._mouse_y = 0

    def reset_mouse_state(self) -> None:
        """Release every button and move the stored position to the origin."""
        self._buttons = [False] * len(Button)
        self._mouse_x = 0
        self._mouse_y = 0

    def _check_button(self, button: int) -> int:
        if not 0 <= button < len(Button):
            raise IndexError(f"unknown mouse button {button}")
        return int(button)

    def set_mouse_button_state(self, button: int, state: bool) -> None:
        self._buttons[self._check_button(button)] = bool(state)

    def get_mouse_button_state(self, button: int) -> bool:
        return self._buttons[self._check_button(button)]

    def set_mouse_position(self, x: int, y: int) -> None:
        """Store a window position, scaled down by the scale factor."""
        self._mouse_x = int(x / self.scale_factor)
        self._mouse_y = int(y / self.scale_factor)

    def get_mouse_position(self) -> Tuple[int, int]:
        return self._mouse_x, self._mouse_y
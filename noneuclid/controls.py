"""Keyboard and mouse state gathered between frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from noneuclid.settings import MOUSE_SMOOTH

KEY_COUNT = 256
BUTTON_COUNT = 3


def _key_index(code: Union[int, str]) -> int:
    if isinstance(code, str):
        code = ord(code)
    return code & 0xFF


def _button_index(button: int) -> int:
    if not 0 <= button < BUTTON_COUNT:
        raise IndexError(f"mouse button {button} out of range")
    return button


@dataclass
class InputState:
    """Held keys, keys pressed this frame and smoothed mouse motion."""

    key: list[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    key_press: list[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    mouse_button: list[bool] = field(default_factory=lambda: [False] * BUTTON_COUNT)
    mouse_button_press: list[bool] = field(default_factory=lambda: [False] * BUTTON_COUNT)
    mouse_dx: float = 0.0
    mouse_dy: float = 0.0
    mouse_ddx: float = 0.0
    mouse_ddy: float = 0.0

    def end_frame(self) -> None:
        """Clear one-frame presses and fold accumulated motion into the smoothed deltas."""
        self.key_press = [False] * KEY_COUNT
        self.mouse_button_press = [False] * BUTTON_COUNT
        self.mouse_dx = self.mouse_dx * MOUSE_SMOOTH + self.mouse_ddx * (1.0 - MOUSE_SMOOTH)
        self.mouse_dy = self.mouse_dy * MOUSE_SMOOTH + self.mouse_ddy * (1.0 - MOUSE_SMOOTH)
        self.mouse_ddx = 0.0
        self.mouse_ddy = 0.0

    def press_key(self, code: Union[int, str]) -> None:
        index = _key_index(code)
        self.key[index] = True
        self.key_press[index] = True

    def release_key(self, code: Union[int, str]) -> None:
        self.key[_key_index(code)] = False

    def press_mouse_button(self, button: int) -> None:
        index = _button_index(button)
        self.mouse_button[index] = True
        self.mouse_button_press[index] = True

    def release_mouse_button(self, button: int) -> None:
        self.mouse_button[_button_index(button)] = False

    def add_mouse_motion(self, dx: float, dy: float) -> None:
        self.mouse_ddx += dx
        self.mouse_ddy += dy
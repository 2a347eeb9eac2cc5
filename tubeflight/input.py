"""Keyboard and mouse state tracked per frame."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

MOUSE_BUTTONS = 500
_SLOTS = 512


class Action(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Key(IntEnum):
    A = 65
    D = 68
    S = 83
    W = 87
    ESCAPE = 256
    TAB = 258
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    F1 = 290
    F2 = 291
    F3 = 292


class InputState:
    """Key and mouse-button state with the frame each last changed in.

    Keys occupy slots below ``MOUSE_BUTTONS``; mouse buttons follow them.
    """

    def __init__(self) -> None:
        self._keys = [False] * _SLOTS
        self._frames = [0] * _SLOTS
        self.current = 0
        self.mouse_delta = np.zeros(2)
        self.mouse_scroll = np.zeros(2)
        self.mouse_position = np.zeros(2)

    def _record(self, slot: int, action: int) -> None:
        if not 0 <= slot < _SLOTS:
            return
        if action == Action.PRESS:
            self._keys[slot] = True
            self._frames[slot] = self.current
        elif action == Action.RELEASE:
            self._keys[slot] = False
            self._frames[slot] = self.current

    def key_callback(self, key: int, action: int) -> None:
        """Record a key press or release."""
        self._record(key, action)

    def mouse_button_callback(self, button: int, action: int) -> None:
        """Record a mouse button press or release."""
        self._record(MOUSE_BUTTONS + button, action)

    def cursor_position_callback(self, x: float, y: float) -> None:
        """Move the cursor, accumulating the motion for this frame."""
        mouse = np.array([x, y], dtype=float)
        self.mouse_delta = self.mouse_delta + (mouse - self.mouse_position)
        self.mouse_position = mouse

    def scroll_callback(self, x: float, y: float) -> None:
        """Record the scroll offset for this frame."""
        self.mouse_scroll = np.array([x, y], dtype=float)

    def update(self) -> None:
        """Advance to the next frame and clear per-frame motion."""
        self.current += 1
        self.mouse_delta = np.zeros(2)
        self.mouse_scroll = np.zeros(2)

    def get_key(self, keycode: int) -> bool:
        """True while the key is held."""
        if not 0 <= keycode < MOUSE_BUTTONS:
            return False
        return self._keys[keycode]

    def get_key_down(self, keycode: int) -> bool:
        """True only in the frame the key went down."""
        if not 0 <= keycode < MOUSE_BUTTONS:
            return False
        return self._keys[keycode] and self._frames[keycode] == self.current

    def get_mouse_button(self, button: int) -> bool:
        """True while the mouse button is held."""
        index = MOUSE_BUTTONS + button
        if not MOUSE_BUTTONS <= index < _SLOTS:
            return False
        return self._keys[index]

    def get_mouse_button_down(self, button: int) -> bool:
        """True only in the frame the mouse button went down."""
        index = MOUSE_BUTTONS + button
        if not MOUSE_BUTTONS <= index < _SLOTS:
            return False
        return self._keys[index] and self._frames[index] == self.current
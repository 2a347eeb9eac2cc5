"""Free-flying first-person camera."""

from __future__ import annotations

import math

import numpy as np

from .input import InputState, Key
from .vectors import (
    BACK,
    IDENTITY_QUAT,
    RIGHT,
    UP,
    look_at_matrix,
    ortho,
    perspective,
    quat_from_euler,
    quat_rotate,
)

_PITCH_LIMIT = math.radians(89.0)


class Camera:
    """Position, orientation and projection matrices of a viewer."""

    def __init__(self, position=(0.0, 0.0, 0.0), rotation=IDENTITY_QUAT, speed: float = 1.0) -> None:
        self.position = np.array(position, dtype=float)
        self.rotation = np.array(rotation, dtype=float)
        self.speed = speed
        self.yaw = 0.0
        self.pitch = 0.0
        self.perspective_projection = np.identity(4)
        self.orthographic_projection = np.identity(4)

    def up_vector(self) -> np.ndarray:
        return quat_rotate(self.rotation, UP)

    def forward_vector(self) -> np.ndarray:
        return quat_rotate(self.rotation, BACK)

    def right_vector(self) -> np.ndarray:
        return quat_rotate(self.rotation, RIGHT)

    def set_view_by_mouse(self, mouse_delta, window_height: int) -> None:
        """Turn the camera by a mouse movement, keeping pitch within 89 degrees."""
        if window_height <= 0:
            raise ValueError("window height must be positive")
        delta = np.asarray(mouse_delta, dtype=float) / float(window_height * 2)
        self.yaw -= float(delta[0])
        self.pitch -= float(delta[1])
        self.pitch = min(max(self.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
        self.rotation = quat_from_euler(self.pitch, self.yaw, 0.0)

    def translate_by_keyboard(self, input_state: InputState, dt: float) -> None:
        """Move along the view with W/S and sideways with D/A."""
        step = self.speed * dt
        if input_state.get_key(Key.W):
            self.position = self.position + self.forward_vector() * step
        if input_state.get_key(Key.S):
            self.position = self.position - self.forward_vector() * step
        if input_state.get_key(Key.D):
            self.position = self.position + self.right_vector() * step
        if input_state.get_key(Key.A):
            self.position = self.position - self.right_vector() * step

    def update(self, dt: float, input_state: InputState, window_height: int, locked: bool) -> None:
        """Apply mouse look (when the cursor is locked) and keyboard motion."""
        if locked:
            self.set_view_by_mouse(input_state.mouse_delta, window_height)
        self.translate_by_keyboard(input_state, dt)

    def view_matrix(self) -> np.ndarray:
        return look_at_matrix(self.position, self.position + self.forward_vector(), self.up_vector())

    def set_perspective_projection(self, fov: float, aspect_ratio: float, near: float, far: float) -> None:
        """Set the perspective projection; ``fov`` is in degrees."""
        self.perspective_projection = perspective(math.radians(fov), aspect_ratio, near, far)

    def set_orthographic_projection(self, width: int, height: int) -> None:
        """Set an orthographic projection covering ``width`` x ``height`` pixels."""
        self.orthographic_projection = ortho(0.0, float(width), 0.0, float(height))
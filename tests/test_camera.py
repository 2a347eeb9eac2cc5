import math

import numpy as np
import pytest

from tubeflight.camera import Camera
from tubeflight.input import Action, InputState, Key


def test_default_basis_vectors():
    camera = Camera()
    np.testing.assert_allclose(camera.forward_vector(), [0.0, 0.0, -1.0])
    np.testing.assert_allclose(camera.up_vector(), [0.0, 1.0, 0.0])
    np.testing.assert_allclose(camera.right_vector(), [1.0, 0.0, 0.0])


def test_keyboard_moves_forward_and_right():
    camera = Camera(speed=2.0)
    state = InputState()
    state.key_callback(Key.W, Action.PRESS)
    state.key_callback(Key.D, Action.PRESS)
    camera.translate_by_keyboard(state, 0.5)
    np.testing.assert_allclose(camera.position, [1.0, 0.0, -1.0])


def test_opposite_keys_cancel():
    camera = Camera(position=(1.0, 2.0, 3.0), speed=5.0)
    state = InputState()
    for key in (Key.W, Key.S, Key.A, Key.D):
        state.key_callback(key, Action.PRESS)
    camera.translate_by_keyboard(state, 1.0)
    np.testing.assert_allclose(camera.position, [1.0, 2.0, 3.0])


def test_pitch_is_clamped():
    camera = Camera()
    camera.set_view_by_mouse((0.0, -1e6), 100)
    assert camera.pitch == pytest.approx(math.radians(89.0))
    camera.set_view_by_mouse((0.0, 1e7), 100)
    assert camera.pitch == pytest.approx(-math.radians(89.0))


def test_mouse_look_keeps_orthonormal_basis():
    camera = Camera()
    camera.set_view_by_mouse((300.0, 120.0), 720)
    f, u, r = camera.forward_vector(), camera.up_vector(), camera.right_vector()
    for v in (f, u, r):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.dot(f, u) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(f, r) == pytest.approx(0.0, abs=1e-9)


def test_zero_height_raises():
    with pytest.raises(ValueError):
        Camera().set_view_by_mouse((1.0, 1.0), 0)


def test_update_ignores_mouse_when_unlocked():
    camera = Camera()
    state = InputState()
    state.cursor_position_callback(50.0, 50.0)
    camera.update(0.1, state, 720, locked=False)
    np.testing.assert_allclose(camera.rotation, [1.0, 0.0, 0.0, 0.0])
    camera.update(0.1, state, 720, locked=True)
    assert camera.yaw < 0.0


def test_view_matrix_maps_position_to_origin():
    camera = Camera(position=(3.0, -2.0, 7.0))
    camera.set_view_by_mouse((100.0, 40.0), 600)
    eye = camera.view_matrix() @ np.array([*camera.position, 1.0])
    np.testing.assert_allclose(eye[:3], [0.0, 0.0, 0.0], atol=1e-9)


def test_orthographic_projection_maps_corners():
    camera = Camera()
    camera.set_orthographic_projection(1280, 720)
    top_right = camera.orthographic_projection @ np.array([1280.0, 720.0, 0.0, 1.0])
    bottom_left = camera.orthographic_projection @ np.array([0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(top_right[:2], [1.0, 1.0])
    np.testing.assert_allclose(bottom_left[:2], [-1.0, -1.0])


def test_perspective_projection_near_plane_maps_to_minus_one():
    camera = Camera()
    camera.set_perspective_projection(45.0, 16 / 9, 0.01, 5000.0)
    clip = camera.perspective_projection @ np.array([0.0, 0.0, -0.01, 1.0])
    assert clip[2] / clip[3] == pytest.approx(-1.0)
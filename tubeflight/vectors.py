"""Small linear-algebra helpers for 3D scenes.

Vectors are numpy arrays. Matrices are 4x4 numpy arrays acting on column
vectors (``m @ v``). Quaternions are arrays in ``(w, x, y, z)`` order.
"""

from __future__ import annotations

import math

import numpy as np


def _const(*values: float) -> np.ndarray:
    array = np.array(values, dtype=float)
    array.setflags(write=False)
    return array


RIGHT = _const(1.0, 0.0, 0.0)
LEFT = _const(-1.0, 0.0, 0.0)
UP = _const(0.0, 1.0, 0.0)
DOWN = _const(0.0, -1.0, 0.0)
FORWARD = _const(0.0, 0.0, 1.0)
BACK = _const(0.0, 0.0, -1.0)
ZERO = _const(0.0, 0.0, 0.0)
NAN = _const(math.nan, math.nan, math.nan)

RIGHT_2D = _const(1.0, 0.0)
LEFT_2D = _const(-1.0, 0.0)
UP_2D = _const(0.0, 1.0)
DOWN_2D = _const(0.0, -1.0)
ZERO_2D = _const(0.0, 0.0)
NAN_2D = _const(math.nan, math.nan)

IDENTITY_QUAT = _const(1.0, 0.0, 0.0, 0.0)


def _vec(v) -> np.ndarray:
    return np.asarray(v, dtype=float)


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length; a zero vector yields NaNs."""
    v = _vec(v)
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


def quat_from_euler(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Build a quaternion from Euler angles in radians (x, y, z)."""
    cx, cy, cz = math.cos(pitch * 0.5), math.cos(yaw * 0.5), math.cos(roll * 0.5)
    sx, sy, sz = math.sin(pitch * 0.5), math.sin(yaw * 0.5), math.sin(roll * 0.5)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_rotate(q, v) -> np.ndarray:
    """Rotate vector ``v`` by quaternion ``q``."""
    q = _vec(q)
    v = _vec(v)
    w, axis = q[0], q[1:]
    uv = np.cross(axis, v)
    uuv = np.cross(axis, uv)
    return v + (uv * w + uuv) * 2.0


def _mat3_to_quat(rotation: np.ndarray) -> np.ndarray:
    m = rotation.T  # m[column][row]
    four_x = m[0][0] - m[1][1] - m[2][2]
    four_y = m[1][1] - m[0][0] - m[2][2]
    four_z = m[2][2] - m[0][0] - m[1][1]
    four_w = m[0][0] + m[1][1] + m[2][2]

    biggest_index, biggest = 0, four_w
    for index, value in enumerate((four_x, four_y, four_z), start=1):
        if value > biggest:
            biggest_index, biggest = index, value

    biggest_val = math.sqrt(biggest + 1.0) * 0.5
    mult = 0.25 / biggest_val

    if biggest_index == 0:
        return np.array(
            [
                biggest_val,
                (m[1][2] - m[2][1]) * mult,
                (m[2][0] - m[0][2]) * mult,
                (m[0][1] - m[1][0]) * mult,
            ]
        )
    if biggest_index == 1:
        return np.array(
            [
                (m[1][2] - m[2][1]) * mult,
                biggest_val,
                (m[0][1] + m[1][0]) * mult,
                (m[2][0] + m[0][2]) * mult,
            ]
        )
    if biggest_index == 2:
        return np.array(
            [
                (m[2][0] - m[0][2]) * mult,
                (m[0][1] + m[1][0]) * mult,
                biggest_val,
                (m[1][2] + m[2][1]) * mult,
            ]
        )
    return np.array(
        [
            (m[0][1] - m[1][0]) * mult,
            (m[2][0] + m[0][2]) * mult,
            (m[1][2] + m[2][1]) * mult,
            biggest_val,
        ]
    )


def quat_look_at(direction, up) -> np.ndarray:
    """Quaternion that turns the -Z axis towards ``direction``."""
    back = -_vec(direction)
    right = np.cross(_vec(up), back)
    right = right / math.sqrt(max(1e-5, float(np.dot(right, right))))
    new_up = np.cross(back, right)
    rotation = np.column_stack([right, new_up, back])
    return _mat3_to_quat(rotation)


def quat_to_mat4(q) -> np.ndarray:
    """Rotation matrix of quaternion ``q``."""
    w, x, y, z = _vec(q)
    xx, yy, zz = x * x, y * y, z * z
    xz, xy, yz = x * z, x * y, y * z
    wx, wy, wz = w * x, w * y, w * z
    return np.array(
        [
            [1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy), 0.0],
            [2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx), 0.0],
            [2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def look_at_matrix(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` at ``center``."""
    eye = _vec(eye)
    f = normalize(_vec(center) - eye)
    s = normalize(np.cross(f, _vec(up)))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -np.dot(s, eye)],
            [u[0], u[1], u[2], -np.dot(u, eye)],
            [-f[0], -f[1], -f[2], np.dot(f, eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth in [-1, 1]."""
    if abs(aspect) <= np.finfo(np.float32).eps:
        raise ValueError("aspect ratio must not be zero")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """Two-dimensional orthographic projection."""
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -1.0
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    return result


def catmull_rom(v1, v2, v3, v4, t: float) -> np.ndarray:
    """Catmull-Rom interpolation between ``v2`` and ``v3``."""
    s2 = t * t
    s3 = s2 * t
    f1 = -s3 + 2.0 * s2 - t
    f2 = 3.0 * s3 - 5.0 * s2 + 2.0
    f3 = -3.0 * s3 + 4.0 * s2 + t
    f4 = s3 - s2
    return (f1 * _vec(v1) + f2 * _vec(v2) + f3 * _vec(v3) + f4 * _vec(v4)) / 2.0


def rotate_vector(v, angle: float, axis) -> np.ndarray:
    """Rotate ``v`` by ``angle`` radians around ``axis``."""
    v = _vec(v)
    k = normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    return v * c + np.cross(k, v) * s + k * np.dot(k, v) * (1.0 - c)


def translate(m, v) -> np.ndarray:
    """Return ``m`` followed by a translation by ``v``."""
    translation = np.identity(4)
    translation[:3, 3] = _vec(v)
    return _vec(m) @ translation


def scale(m, v) -> np.ndarray:
    """Return ``m`` followed by a per-axis scale by ``v``."""
    scaling = np.diag([*_vec(v), 1.0])
    return _vec(m) @ scaling
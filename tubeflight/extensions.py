"""Matrix decomposition and smooth motion helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .vectors import normalize

_FLT_EPSILON = float(np.finfo(np.float32).eps)


@dataclass(eq=False)
class Decomposition:
    """Translation, Euler rotation (radians) and scale of a transform."""

    translation: np.ndarray
    rotation: np.ndarray
    scale: np.ndarray


def decompose(transform) -> Decomposition:
    """Split a 4x4 transform into translation, rotation and scale.

    Raises ValueError when the matrix cannot be normalised.
    """
    m = np.array(transform, dtype=float).T.copy()  # m[column][row]

    if abs(m[3][3]) < _FLT_EPSILON:
        raise ValueError("matrix cannot be decomposed: w component is zero")

    if any(abs(m[i][3]) >= _FLT_EPSILON for i in range(3)):
        m[0][3] = m[1][3] = m[2][3] = 0.0
        m[3][3] = 1.0

    translation = m[3][:3].copy()
    m[3] = [0.0, 0.0, 0.0, m[3][3]]

    rows = [m[i][:3].copy() for i in range(3)]
    scale = np.array([np.linalg.norm(row) for row in rows])
    with np.errstate(invalid="ignore", divide="ignore"):
        rows = [row / length for row, length in zip(rows, scale)]

    rotation = np.zeros(3)
    rotation[1] = math.asin(float(np.clip(-rows[0][2], -1.0, 1.0)))
    if math.cos(rotation[1]) != 0:
        rotation[0] = math.atan2(rows[1][2], rows[2][2])
        rotation[2] = math.atan2(rows[0][1], rows[0][0])
    else:
        rotation[0] = math.atan2(-rows[2][0], rows[1][1])
        rotation[2] = 0.0

    return Decomposition(translation=translation, rotation=rotation, scale=scale)


def look_at_rotation(matrix, target) -> np.ndarray:
    """Rotation basis (left, up, forward columns) aiming from the matrix at ``target``.

    Translation and scale of the input are discarded.
    """
    m = np.asarray(matrix, dtype=float)
    position = np.array([m[1, 1], m[2, 1], m[3, 1]])
    forward = normalize(np.asarray(target, dtype=float) - position)

    if abs(forward[0]) < _FLT_EPSILON and abs(forward[2]) < _FLT_EPSILON:
        up = np.array([0.0, 0.0, -1.0]) if forward[1] > 0 else np.array([0.0, 0.0, 1.0])
    else:
        up = np.array([0.0, 1.0, 0.0])

    left = normalize(np.cross(up, forward))
    up = np.cross(forward, left)

    result = np.zeros((4, 4))
    result[:3, 0] = left
    result[:3, 1] = up
    result[:3, 2] = forward
    return result


def move_towards(current, target, max_distance_delta: float) -> np.ndarray:
    """Step from ``current`` relative to ``target`` by at most the given delta."""
    current = np.asarray(current, dtype=float)
    target = np.asarray(target, dtype=float)
    change = current - target
    sqdist = float(np.dot(change, change))

    if sqdist == 0 or (max_distance_delta >= 0 and sqdist <= max_distance_delta**2):
        return target.copy()

    dist = math.sqrt(sqdist) * max_distance_delta
    with np.errstate(invalid="ignore", divide="ignore"):
        return current + change / dist


def smooth_damp(
    current,
    target,
    current_velocity,
    smooth_time: float,
    max_speed: float,
    delta_time: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Critically damped spring step; returns ``(position, velocity)``."""
    current = np.asarray(current, dtype=float)
    target = np.asarray(target, dtype=float)
    velocity = np.asarray(current_velocity, dtype=float)

    smooth_time = max(0.0001, smooth_time)
    omega = 2.0 / smooth_time

    x = omega * delta_time
    exp = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)

    change = current - target

    max_change = max_speed * smooth_time
    sqr_mag = float(np.dot(change, change))
    if sqr_mag > max_change * max_change:
        with np.errstate(invalid="ignore", divide="ignore"):
            change = change / (math.sqrt(sqr_mag) * max_change)

    dest = current - change
    temp = (velocity + omega * change) * delta_time
    velocity = (velocity - omega * temp) * exp
    output = dest + (change + temp) * exp

    if np.dot(target - current, output - target) > 0:
        return target.copy(), np.zeros(3)

    return output, velocity
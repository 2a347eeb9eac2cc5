"""View-frustum planes and sphere culling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np


class Side(IntEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    BACK = 4
    FRONT = 5


@dataclass
class Frustum:
    """Six clipping planes taken from a projection-style matrix.

    From a projection matrix alone the planes are in eye space, from
    view-projection in world space, from model-view-projection in model space.
    """

    planes: np.ndarray = field(default_factory=lambda: np.zeros((6, 4)))

    def update(self, matrix) -> None:
        """Extract and normalise the planes of ``matrix``."""
        m = np.asarray(matrix, dtype=float)
        row0, row1, row2, row3 = m[0], m[1], m[2], m[3]
        planes = np.zeros((6, 4))
        planes[Side.TOP] = row3 - row1
        planes[Side.BOTTOM] = row3 + row1
        planes[Side.LEFT] = row3 + row0
        planes[Side.RIGHT] = row3 - row0
        planes[Side.BACK] = row3 + row2
        planes[Side.FRONT] = row3 - row2
        with np.errstate(invalid="ignore", divide="ignore"):
            self.planes = planes / np.linalg.norm(planes, axis=1, keepdims=True)

    def check_sphere(self, position, radius: float) -> bool:
        """True unless the sphere lies wholly outside one of the planes."""
        pos = np.asarray(position, dtype=float)
        return not any(
            float(np.dot(plane[:3], pos) + plane[3]) <= -radius for plane in self.planes
        )
"""Closed Catmull-Rom spline sampled at (roughly) equal arc lengths."""

from __future__ import annotations

import bisect
import math
from typing import Iterable

import numpy as np

from .vectors import catmull_rom, normalize


class CatmullRom:
    """A closed Catmull-Rom curve through a ring of control points.

    After :meth:`uniformly_sample_control_points`, ``control_points`` holds a
    resampled control polygon, and ``centreline_points`` with
    ``centreline_normals`` hold the evenly spaced samples along it.
    """

    def __init__(self) -> None:
        self.distances: list[float] = []
        self.control_points: list[np.ndarray] = []
        self.centreline_points: list[np.ndarray] = []
        self.centreline_normals: list[np.ndarray] = []

    def _compute_lengths_along_control_points(self) -> None:
        points = self.control_points
        accumulated = 0.0
        self.distances = [accumulated]
        for previous, current in zip(points, points[1:]):
            accumulated += float(np.linalg.norm(current - previous))
            self.distances.append(accumulated)
        accumulated += float(np.linalg.norm(points[0] - points[-1]))
        self.distances.append(accumulated)

    def sample(self, distance: float) -> tuple[np.ndarray, np.ndarray] | None:
        """Point and direction at ``distance`` along the closed control polygon.

        Distances beyond the total length wrap around. Returns None for a
        negative distance or when the curve has no length to sample.
        """
        if distance < 0 or not self.control_points or not self.distances:
            return None

        total_length = self.distances[-1]
        if total_length <= 0:
            return None

        length = distance - math.trunc(distance / total_length) * total_length

        j = bisect.bisect_right(self.distances, length) - 1
        if j < 0 or j >= len(self.distances) - 1:
            return None

        segment_length = self.distances[j + 1] - self.distances[j]
        t = (length - self.distances[j]) / segment_length

        count = len(self.control_points)
        v1 = self.control_points[(j - 1) % count]
        v2 = self.control_points[j]
        v3 = self.control_points[(j + 1) % count]
        v4 = self.control_points[(j + 2) % count]

        return catmull_rom(v1, v2, v3, v4, t), normalize(v2 - v1)

    def _uniform_sample(self, num_samples: int) -> None:
        self._compute_lengths_along_control_points()
        total_length = self.distances[-1]
        if total_length <= 0:
            raise ValueError("control polygon has zero length")
        spacing = total_length / num_samples

        for i in range(num_samples):
            sampled = self.sample(i * spacing)
            if sampled is not None:
                point, normal = sampled
                self.centreline_points.append(point)
                self.centreline_normals.append(normal)

    def uniformly_sample_control_points(
        self, points: Iterable, num_samples: int
    ) -> None:
        """Resample ``points`` into ``num_samples`` evenly spaced curve points.

        The sampling runs twice so the final points are close to equidistant.
        """
        if num_samples < 1:
            raise ValueError("num_samples must be positive")
        control = [np.asarray(p, dtype=float) for p in points]
        if not control:
            raise ValueError("at least one control point is required")

        self.control_points = control
        self.centreline_points = []
        self.centreline_normals = []
        self.distances = []
        self._uniform_sample(num_samples)

        self.control_points = self.centreline_points
        self.centreline_points = []
        self.centreline_normals = []
        self.distances = []
        self._uniform_sample(num_samples)
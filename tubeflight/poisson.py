"""Poisson-disk sampling over a rectangle."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .randomness import Random


def disk_sampler_2d(
    radius: float,
    sample_region_size,
    num_samples_before_rejection: int = 30,
    rng: Random | None = None,
) -> list[np.ndarray]:
    """Points in ``[0, w) x [0, h)`` no closer than ``radius`` to each other."""
    if radius <= 0:
        raise ValueError("radius must be positive")
    rng = rng if rng is not None else Random()

    region = np.asarray(sample_region_size, dtype=float)
    cell_size = radius / math.sqrt(2.0)
    columns = math.ceil(region[0] / cell_size)
    rows = math.ceil(region[1] / cell_size)
    grid = [[0] * rows for _ in range(columns)]

    points: list[np.ndarray] = []
    spawn_points: list[np.ndarray] = [region / 2.0]

    while spawn_points:
        spawn_index = rng.int_range(0, len(spawn_points) - 1)
        spawn_centre = spawn_points[spawn_index]

        for _ in range(num_samples_before_rejection):
            angle = rng.float_value() * 2.0 * math.pi
            direction = np.array([math.sin(angle), math.cos(angle)])
            candidate = spawn_centre + direction * rng.float_range(radius, 2 * radius)

            if is_valid(candidate, region, cell_size, radius, points, grid):
                points.append(candidate)
                spawn_points.append(candidate)
                grid[int(candidate[0] / cell_size)][int(candidate[1] / cell_size)] = len(points)
                break
        else:
            del spawn_points[spawn_index]

    return points


def is_valid(
    candidate,
    sample_region_size,
    cell_size: float,
    radius: float,
    points: Sequence,
    grid: Sequence[Sequence[int]],
) -> bool:
    """True if ``candidate`` lies in the region and clear of accepted points.

    ``grid`` holds 1-based indices into ``points``, 0 for an empty cell.
    """
    x, y = float(candidate[0]), float(candidate[1])
    width, height = float(sample_region_size[0]), float(sample_region_size[1])
    if not (0 <= x < width and 0 <= y < height):
        return False

    cell_x = int(x / cell_size)
    cell_y = int(y / cell_size)
    start_x = max(0, cell_x - 2)
    end_x = min(cell_x + 2, len(grid) - 1)
    start_y = max(0, cell_y - 2)
    end_y = min(cell_y + 2, len(grid[0]) - 1)

    radius_sq = radius * radius
    candidate_arr = np.array([x, y])
    for column in grid[start_x : end_x + 1]:
        for entry in column[start_y : end_y + 1]:
            if entry:
                offset = candidate_arr - np.asarray(points[entry - 1], dtype=float)
                if float(np.dot(offset, offset)) < radius_sq:
                    return False
    return True
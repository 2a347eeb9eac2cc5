"""Procedurally generated meshes."""

from __future__ import annotations

import math
from typing import Any, Iterable

import numpy as np

from .mesh import Mesh, PrimitiveMode, Vertex
from .vectors import normalize

_QUAD_UVS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_TRIANGLE_UVS = ((0.0, 0.0), (1.0, 0.0), (0.5, 1.0))

# Corner signs and outward normal of each cuboid face, in emission order.
_CUBOID_FACES = (
    (((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)), (0, 0, 1)),
    (((1, -1, 1), (1, -1, -1), (1, 1, -1), (1, 1, 1)), (1, 0, 0)),
    (((1, -1, -1), (-1, -1, -1), (-1, 1, -1), (1, 1, -1)), (0, 0, -1)),
    (((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1)), (-1, 0, 0)),
    (((-1, 1, 1), (1, 1, 1), (1, 1, -1), (-1, 1, -1)), (0, 1, 0)),
    (((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1)), (0, -1, 0)),
)


def _textures(texture: Any) -> list[Any]:
    return [texture] if texture is not None else []


def _vec(value) -> np.ndarray:
    return np.asarray(value, dtype=float)


def cuboid(half_extents, inwards: bool, texture: Any) -> Mesh:
    """Box centred on the origin; ``inwards`` flips the normals (for skyboxes)."""
    half = _vec(half_extents)
    orientation = -1.0 if inwards else 1.0

    vertices: list[Vertex] = []
    indices: list[int] = []
    for corners, normal in _CUBOID_FACES:
        base = len(vertices)
        face_normal = _vec(normal) * orientation
        for corner, uv in zip(corners, _QUAD_UVS):
            vertices.append(Vertex(_vec(corner) * half, face_normal, uv))
        indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))

    return Mesh(vertices, indices, _textures(texture))


def sphere(stacks: int, slices: int, radius: float, texture: Any) -> Mesh:
    """UV sphere around the z axis with ``stacks`` rings of ``slices`` sectors."""
    if stacks < 1 or slices < 1:
        raise ValueError("stacks and slices must be positive")
    if radius == 0:
        raise ValueError("radius must not be zero")

    slice_step = 2.0 * math.pi / slices
    stack_step = math.pi / stacks
    length_inv = 1.0 / radius

    vertices: list[Vertex] = []
    for i in range(stacks + 1):
        stack_angle = math.pi / 2.0 - i * stack_step
        xy = radius * math.cos(stack_angle)
        z = radius * math.sin(stack_angle)
        for j in range(slices + 1):
            slice_angle = j * slice_step
            position = np.array([xy * math.cos(slice_angle), xy * math.sin(slice_angle), z])
            vertices.append(
                Vertex(position, position * length_inv, (i / stacks, 1.0 - j / slices))
            )

    indices: list[int] = []
    for i in range(stacks):
        current_stack = i * (slices + 1)
        next_stack = current_stack + slices + 1
        for j in range(slices):
            k1 = current_stack + j
            k2 = next_stack + j
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != stacks - 1:
                indices.extend((k1 + 1, k2, k2 + 1))

    return Mesh(vertices, indices, _textures(texture))


def quad(extent, texture: Any) -> Mesh:
    """Two triangles spanning ``[-x, x] x [-y, y]`` in the z = 0 plane."""
    ex, ey = _vec(extent)
    corners = (
        ((-ex, -ey, 0.0), (0.0, 0.0)),
        ((ex, -ey, 0.0), (1.0, 0.0)),
        ((-ex, ey, 0.0), (0.0, 1.0)),
        ((ex, -ey, 0.0), (1.0, 0.0)),
        ((ex, ey, 0.0), (1.0, 1.0)),
        ((-ex, ey, 0.0), (0.0, 1.0)),
    )
    vertices = [Vertex(position, (1.0, 1.0, 1.0), uv) for position, uv in corners]
    return Mesh(vertices, textures=_textures(texture))


def _flat_triangles(corners: list[np.ndarray], faces, texture: Any) -> Mesh:
    vertices = [
        Vertex(corners[index], normal, uv)
        for triangle, normal in faces
        for index, uv in zip(triangle, _TRIANGLE_UVS)
    ]
    return Mesh(vertices, textures=_textures(texture))


def octahedron(extent, texture: Any) -> Mesh:
    """Eight flat-shaded triangles around the origin."""
    ex, ey, ez = _vec(extent)
    v = [
        np.array([0.0, ey, 0.0]),
        np.array([ex, 0.0, ez]),
        np.array([-ex, 0.0, ez]),
        np.array([-ex, 0.0, -ez]),
        np.array([ex, 0.0, -ez]),
        np.array([0.0, -ey, 0.0]),
    ]
    faces = (
        ((0, 2, 1), np.cross(v[0] - v[2], v[0] - v[1])),
        ((0, 3, 2), np.cross(v[0] - v[3], v[0] - v[2])),
        ((0, 1, 4), np.cross(v[0] - v[1], v[0] - v[4])),
        ((0, 4, 3), np.cross(v[0] - v[4], v[0] - v[3])),
        ((1, 2, 5), -np.cross(v[5] - v[2], v[5] - v[1])),
        ((2, 3, 5), -np.cross(v[5] - v[3], v[5] - v[2])),
        ((4, 1, 5), -np.cross(v[5] - v[1], v[5] - v[4])),
        ((3, 4, 5), -np.cross(v[5] - v[4], v[5] - v[3])),
    )
    return _flat_triangles(v, faces, texture)


def tetrahedron(extent, texture: Any) -> Mesh:
    """Four flat-shaded triangles with the apex on the y axis."""
    ex, ey, ez = _vec(extent)
    v = [
        np.array([0.0, ey, 0.0]),
        np.array([0.0, 0.0, ez]),
        np.array([-ex, 0.0, -ez]),
        np.array([ex, 0.0, -ez]),
    ]
    faces = (
        ((0, 2, 1), np.cross(v[0] - v[2], v[0] - v[1])),
        ((0, 3, 2), np.cross(v[0] - v[3], v[0] - v[2])),
        ((0, 1, 3), np.cross(v[0] - v[1], v[0] - v[3])),
        ((1, 2, 3), np.cross(v[1] - v[2], v[1] - v[3])),
    )
    return _flat_triangles(v, faces, texture)


def line(points: Iterable, texture: Any) -> Mesh:
    """Closed polyline through ``points``."""
    vertices = [Vertex(point, (1.0, 1.0, 1.0), (0.0, 0.0)) for point in points]
    return Mesh(vertices, textures=_textures(texture), mode=PrimitiveMode.LINE_LOOP)


def tube(points, radius: float, stacks: int, texture: Any) -> Mesh:
    """Rings of ``stacks + 1`` points of the given radius along a path.

    One ring is placed at every point except the last; the result is a point
    cloud.
    """
    if stacks < 1:
        raise ValueError("stacks must be positive")

    step = math.pi * 2.0 / stacks
    circle = [
        (radius * math.cos(i * step), radius * math.sin(i * step)) for i in range(stacks + 1)
    ]

    path = [_vec(point) for point in points]
    vertices: list[Vertex] = []
    for current, following in zip(path, path[1:]):
        tangent = normalize(following - current)
        binormal = normalize(np.cross(tangent, following + current))
        normal_axis = normalize(np.cross(binormal, tangent))
        for px, py in circle:
            offset = binormal * px + normal_axis * py
            vertices.append(Vertex(current + offset, -normalize(offset), (0.0, 0.0)))

    return Mesh(vertices, textures=_textures(texture), mode=PrimitiveMode.POINTS)


def torus(sides: int, cs_sides: int, radius: float, cs_radius: float, texture: Any) -> Mesh:
    """Torus in the xy plane drawn as one triangle strip.

    ``sides`` divides the main ring, ``cs_sides`` the cross-section; both work
    in whole degrees and must lie in 1..360.
    """
    if not (1 <= sides <= 360 and 1 <= cs_sides <= 360):
        raise ValueError("sides and cs_sides must be between 1 and 360")

    angle_step = int(360.0 / sides)
    cs_angle_step = int(360.0 / cs_sides)
    d_to_r = math.pi / 180.0

    vertices: list[Vertex] = []
    for j in range(0, 361, cs_angle_step):
        current_radius = radius + cs_radius * math.cos(j * d_to_r)
        z = cs_radius * math.sin(j * d_to_r)
        v = abs(2.0 * j / 360.0 - 1.0)
        for i in range(0, 361, angle_step):
            cos_i, sin_i = math.cos(i * d_to_r), math.sin(i * d_to_r)
            position = np.array([current_radius * cos_i, current_radius * sin_i, z])
            centre = np.array([radius * cos_i, radius * sin_i, 0.0])
            vertices.append(Vertex(position, normalize(position - centre), (i / 360.0, v)))

    next_row = sides + 1
    indices: list[int] = []
    for i in range(cs_sides):
        for j in range(sides):
            indices.extend(((i + 1) * next_row + j, i * next_row + j))
        # Degenerate triangle so the strip does not join the next ring.
        dummy = i * next_row + sides
        indices.extend((dummy + next_row, dummy, dummy + next_row, dummy + next_row))

    return Mesh(vertices, indices, _textures(texture), PrimitiveMode.TRIANGLE_STRIP)
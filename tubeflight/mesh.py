"""Vertex and mesh data ready to be uploaded to a graphics device."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

import numpy as np


class PrimitiveMode(IntEnum):
    """How a vertex stream is assembled into primitives."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004
    TRIANGLE_STRIP = 0x0005
    TRIANGLE_FAN = 0x0006


def _as_vector(value, size: int, name: str) -> np.ndarray:
    array = np.array(value, dtype=float).reshape(-1)
    if array.shape != (size,):
        raise ValueError(f"{name} must have {size} components, got {array.shape[0]}")
    return array


@dataclass(eq=False)
class Vertex:
    """A position, a normal and a texture coordinate."""

    position: np.ndarray
    normal: np.ndarray
    texture: np.ndarray

    def __post_init__(self) -> None:
        self.position = _as_vector(self.position, 3, "position")
        self.normal = _as_vector(self.normal, 3, "normal")
        self.texture = _as_vector(self.texture, 2, "texture")


@dataclass(eq=False)
class Mesh:
    """Vertices, optional indices into them, textures and a primitive mode."""

    vertices: list[Vertex]
    indices: list[int] = field(default_factory=list)
    textures: list[Any] = field(default_factory=list)
    mode: PrimitiveMode = PrimitiveMode.TRIANGLES

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = [int(index) for index in self.indices]
        self.textures = list(self.textures)
        self.mode = PrimitiveMode(self.mode)
        if any(index < 0 for index in self.indices):
            raise ValueError("indices must not be negative")

    def draw_count(self) -> int:
        """Number of elements drawn: the indices if any, else the vertices."""
        return len(self.indices) if self.indices else len(self.vertices)
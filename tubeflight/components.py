"""Entity component data for scene objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .vectors import IDENTITY_QUAT, quat_to_mat4, scale, translate


@dataclass
class TransformComponent:
    translation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: IDENTITY_QUAT.copy())
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def matrix(self) -> np.ndarray:
        """Model matrix: translate, then rotate, then scale."""
        identity = np.identity(4)
        return translate(identity, self.translation) @ quat_to_mat4(self.rotation) @ scale(identity, self.scale)


@dataclass
class ModelComponent:
    model: Any = None
    radius: float = 1.0
    transparency: float = 1.0


@dataclass
class MeshComponent:
    mesh: Any = None
    radius: float = 1.0
    transparency: float = 1.0


@dataclass
class ShipComponent:
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    shift: np.ndarray = field(default_factory=lambda: np.zeros(2))
    speed: float = 5.0
    max_speed: float = 0.01
    path: int = 0


@dataclass
class BlinkComponent:
    """Marks a mesh whose transparency cycles."""
"""Light descriptions and their shader uniforms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

import numpy as np

from .vectors import normalize


class UniformSink(Protocol):
    """Anything that accepts named uniform values, such as a shader program."""

    def set_uniform(self, name: str, value: Any) -> None: ...


def _ones() -> np.ndarray:
    return np.ones(3)


def _zeros() -> np.ndarray:
    return np.zeros(3)


@dataclass
class BaseLight:
    color: np.ndarray = field(default_factory=_ones)
    ambient_intensity: float = 0.0
    diffuse_intensity: float = 0.0


@dataclass
class Attenuation:
    constant: float = 1.0
    linear: float = 0.001
    exp: float = 0.001


@dataclass
class DirectionalLight(BaseLight):
    direction: np.ndarray = field(default_factory=_zeros)

    def submit(self, shader: UniformSink) -> None:
        """Send this light to the shader."""
        shader.set_uniform("gDirectionalLight.Base.Color", self.color)
        shader.set_uniform("gDirectionalLight.Base.AmbientIntensity", self.ambient_intensity)
        shader.set_uniform("gDirectionalLight.Direction", normalize(self.direction))
        shader.set_uniform("gDirectionalLight.Base.DiffuseIntensity", self.diffuse_intensity)


@dataclass
class PointLight(BaseLight):
    position: np.ndarray = field(default_factory=_zeros)
    attenuation: Attenuation = field(default_factory=Attenuation)

    def submit(self, shader: UniformSink, index: int) -> None:
        """Send this light to slot ``index`` of the point-light array."""
        prefix = f"gPointLights[{index}]"
        shader.set_uniform(f"{prefix}.Base.Color", self.color)
        shader.set_uniform(f"{prefix}.Base.AmbientIntensity", self.ambient_intensity)
        shader.set_uniform(f"{prefix}.Position", self.position)
        shader.set_uniform(f"{prefix}.Base.DiffuseIntensity", self.diffuse_intensity)
        shader.set_uniform(f"{prefix}.Atten.Constant", self.attenuation.constant)
        shader.set_uniform(f"{prefix}.Atten.Linear", self.attenuation.linear)
        shader.set_uniform(f"{prefix}.Atten.Exp", self.attenuation.exp)


@dataclass
class SpotLight(PointLight):
    direction: np.ndarray = field(default_factory=_zeros)
    cutoff: float = 0.0

    def submit(self, shader: UniformSink, index: int) -> None:
        """Send this light to slot ``index`` of the spot-light array."""
        prefix = f"gSpotLights[{index}]"
        shader.set_uniform(f"{prefix}.Base.Base.Color", self.color)
        shader.set_uniform(f"{prefix}.Base.Base.AmbientIntensity", self.ambient_intensity)
        shader.set_uniform(f"{prefix}.Base.Position", self.position)
        shader.set_uniform(f"{prefix}.Base.Base.DiffuseIntensity", self.diffuse_intensity)
        shader.set_uniform(f"{prefix}.Base.Atten.Constant", self.attenuation.constant)
        shader.set_uniform(f"{prefix}.Base.Atten.Linear", self.attenuation.linear)
        shader.set_uniform(f"{prefix}.Base.Atten.Exp", self.attenuation.exp)
        shader.set_uniform(f"{prefix}.Direction", normalize(self.direction))
        shader.set_uniform(f"{prefix}.Cutoff", self.cutoff)
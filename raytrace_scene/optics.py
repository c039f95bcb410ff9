"""Optical properties of lights, scenes and figures."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytrace_scene.geometry import Point3D


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value!r}")


@dataclass
class LightSource:
    """A point light with an 8-bit colour per channel."""

    position: Point3D = field(default_factory=Point3D)
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))


@dataclass
class SceneProps:
    """Ambient light colour and the scene's light sources."""

    ar: int = 0
    ag: int = 0
    ab: int = 0
    lights: list[LightSource] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("ar", "ag", "ab"):
            _check_channel(name, getattr(self, name))


@dataclass
class FigureOpticProps:
    """Reflection coefficients of a figure."""

    # diffuse (and ambient) reflection per red, green, blue component
    kdr: float = 0.0
    kdg: float = 0.0
    kdb: float = 0.0
    # specular reflection per red, green, blue component
    ksr: float = 0.0
    ksg: float = 0.0
    ksb: float = 0.0
    # Blinn specular exponent
    power: float = 0.0
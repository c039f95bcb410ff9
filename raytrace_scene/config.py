"""Renderer settings: background, quality and camera, kept in a plain-text file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Callable, Iterator, Sequence

from raytrace_scene.geometry import Point3D


class ConfigError(Exception):
    """Raised when a settings file cannot be read or written."""


@dataclass(frozen=True)
class ConfigState:
    """All renderer settings.

    Colour channels, ``depth`` and ``quality`` are 8-bit integers; ``zf`` and
    ``zb`` are the near and far clipping distances, ``sw`` and ``sh`` the size
    of the camera screen.
    """

    br: int = 168
    bg: int = 217
    bb: int = 255
    gamma: float = 1.0
    depth: int = 3
    quality: int = 0
    eye: Point3D = field(default_factory=lambda: Point3D(0.0, 0.0, 0.0))
    view: Point3D = field(default_factory=lambda: Point3D(10.0, 0.0, 0.0))
    up: Point3D = field(default_factory=lambda: Point3D(0.0, 0.0, 1.0))
    zf: float = 8.0
    zb: float = 100.0
    sw: float = 1.0
    sh: float = 1080.0 / 1920.0


def _byte(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ConfigError(f"expected an integer, got {token!r}") from None
    if not 0 <= value <= 255:
        raise ConfigError(f"value must be in 0..255, got {value}")
    return value


def _real(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ConfigError(f"expected a number, got {token!r}") from None


@dataclass(frozen=True)
class _Step:
    label: str
    count: int
    convert: Callable[[str], object]
    assign: Callable[[Sequence], dict]


_STEPS = (
    _Step("background colour", 3, _byte, lambda v: {"br": v[0], "bg": v[1], "bb": v[2]}),
    _Step("gamma", 1, _real, lambda v: {"gamma": v[0]}),
    _Step("depth", 1, _byte, lambda v: {"depth": v[0]}),
    _Step("quality", 1, _byte, lambda v: {"quality": v[0]}),
    _Step("eye point", 3, _real, lambda v: {"eye": Point3D(*v)}),
    _Step("view point", 3, _real, lambda v: {"view": Point3D(*v)}),
    _Step("up vector", 3, _real, lambda v: {"up": Point3D(*v)}),
    _Step("clipping distances", 2, _real, lambda v: {"zf": v[0], "zb": v[1]}),
    _Step("screen size", 2, _real, lambda v: {"sw": v[0], "sh": v[1]}),
)


def _meaningful_lines(text: str) -> Iterator[list[str]]:
    """Token lists of lines that hold something besides comments and blanks."""
    for raw in text.splitlines():
        tokens = raw.split("//", 1)[0].split()
        if tokens:
            yield tokens


def _num(value: float) -> str:
    return repr(float(value))


def _vec(point: Point3D) -> str:
    return " ".join(_num(c) for c in point)


class ConfigKeeper:
    """Holds the current settings and loads or saves them."""

    def __init__(self) -> None:
        self.state = ConfigState()

    def read_config(self, path: str | os.PathLike) -> None:
        """Load settings from ``path``.

        Values are read in a fixed order, one group per non-empty line;
        ``//`` starts a comment. A file that ends early leaves the remaining
        settings unchanged.
        """
        try:
            with open(path, encoding="utf-8") as file:
                text = file.read()
        except FileNotFoundError:
            raise ConfigError("file not found") from None
        except OSError as exc:
            raise ConfigError(str(exc)) from exc

        updates: dict = {}
        for step, tokens in zip(_STEPS, _meaningful_lines(text)):
            if len(tokens) < step.count:
                raise ConfigError(
                    f"{step.label}: expected {step.count} values, got {len(tokens)}"
                )
            values = [step.convert(token) for token in tokens[: step.count]]
            updates.update(step.assign(values))
        self.state = replace(self.state, **updates)

    def write_config(self, path: str | os.PathLike) -> None:
        """Save the current settings to ``path`` in the format read_config accepts."""
        s = self.state
        lines = [
            f"{s.br} {s.bg} {s.bb} // Br Bg Bb - background colour, 0..255",
            f"{_num(s.gamma)} // gamma, 0.0 ... 1.0",
            f"{s.depth} // render depth, 1..10",
            f"{s.quality} // quality, 0..4",
            f"{_vec(s.eye)} // eyeX eyeY eyeZ - camera position in world coordinates",
            f"{_vec(s.view)} // viewX viewY viewZ - point the camera looks at",
            f"{_vec(s.up)} // upX upY upZ - up vector in world coordinates",
            f"{_num(s.zf)} {_num(s.zb)} // zf zb - near and far clipping distances",
            f"{_num(s.sw)} {_num(s.sh)} // sw sh - width and height of the camera screen",
        ]
        try:
            with open(path, "w", encoding="utf-8") as file:
                file.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise ConfigError("file couldn't be created") from exc
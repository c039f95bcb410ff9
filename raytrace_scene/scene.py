"""Scene files: ambient light, light sources and figures with their optics."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence

from raytrace_scene.box import Box
from raytrace_scene.geometry import Figure, Point3D, Polygon
from raytrace_scene.optics import FigureOpticProps, LightSource, SceneProps
from raytrace_scene.quadrangle import Quadrangle
from raytrace_scene.sphere import Sphere
from raytrace_scene.triangle import Triangle

_OPTIC_VALUES = 7


class SceneError(ValueError):
    """Raised when a scene file is missing or malformed."""


@dataclass
class SceneDescription:
    """Everything a scene file describes; ``optics[i]`` belongs to ``figures[i]``."""

    props: SceneProps = field(default_factory=SceneProps)
    figures: list[Figure] = field(default_factory=list)
    optics: list[FigureOpticProps] = field(default_factory=list)


@dataclass(frozen=True)
class _Kind:
    rows: tuple[int, ...]
    build: Callable[[list[list[float]]], Figure]


def _point(row: Sequence[float]) -> Point3D:
    return Point3D(*row)


_KINDS = {
    "SPHERE": _Kind((3, 1), lambda r: Sphere(_point(r[0]), r[1][0])),
    "BOX": _Kind((3, 3), lambda r: Box(_point(r[0]), _point(r[1]))),
    "TRIANGLE": _Kind(
        (3, 3, 3), lambda r: Triangle(Polygon(_point(r[0]), _point(r[1]), _point(r[2])))
    ),
    "QUADRANGLE": _Kind(
        (3, 3, 3, 3),
        lambda r: Quadrangle(_point(r[0]), _point(r[1]), _point(r[2]), _point(r[3])),
    ),
}


def _meaningful_lines(text: str) -> Iterator[list[str]]:
    for raw in text.splitlines():
        tokens = raw.split("//", 1)[0].split()
        if tokens:
            yield tokens


def _reals(tokens: Sequence[str], count: int, what: str) -> list[float]:
    if len(tokens) < count:
        raise SceneError(f"{what}: expected {count} values, got {len(tokens)}")
    try:
        return [float(t) for t in tokens[:count]]
    except ValueError:
        raise SceneError(f"{what}: expected numbers, got {' '.join(tokens)!r}") from None


def _bytes(tokens: Sequence[str], count: int, what: str) -> list[int]:
    if len(tokens) < count:
        raise SceneError(f"{what}: expected {count} values, got {len(tokens)}")
    try:
        values = [int(t) for t in tokens[:count]]
    except ValueError:
        raise SceneError(f"{what}: expected integers, got {' '.join(tokens)!r}") from None
    if any(not 0 <= v <= 255 for v in values):
        raise SceneError(f"{what}: colour values must be in 0..255")
    return values


def _next(lines: Iterator[list[str]], what: str) -> list[str]:
    tokens = next(lines, None)
    if tokens is None:
        raise SceneError(f"unexpected end of file, expected {what}")
    return tokens


def _parse(lines: Iterator[list[str]]) -> SceneDescription:
    ar, ag, ab = _bytes(_next(lines, "ambient colour"), 3, "ambient colour")

    count_tokens = _next(lines, "number of lights")
    try:
        light_count = int(count_tokens[0])
    except ValueError:
        raise SceneError(f"invalid number of lights {count_tokens[0]!r}") from None
    if light_count < 0:
        raise SceneError(f"number of lights must not be negative, got {light_count}")

    lights = []
    for index in range(light_count):
        what = f"light {index + 1}"
        tokens = _next(lines, what)
        x, y, z = _reals(tokens, 3, what)
        r, g, b = _bytes(tokens[3:], 3, what)
        lights.append(LightSource(Point3D(x, y, z), r, g, b))

    scene = SceneDescription(props=SceneProps(ar, ag, ab, lights))

    current: tuple[str, _Kind] | None = None
    rows: list[list[float]] = []
    for keyword, *values in lines:
        kind = _KINDS.get(keyword)
        if kind is None:
            raise SceneError("Invalid figure type")
        if current is not None and current[0] != keyword:
            raise SceneError(f"{keyword} line inside an unfinished {current[0]}")
        current = (keyword, kind)

        step = len(rows)
        if step < len(kind.rows):
            rows.append(_reals(values, kind.rows[step], keyword))
            continue

        optic = FigureOpticProps(*_reals(values, _OPTIC_VALUES, f"{keyword} optics"))
        scene.figures.append(kind.build(rows))
        scene.optics.append(optic)
        current = None
        rows = []

    if current is not None:
        raise SceneError(f"unexpected end of file inside {current[0]}")
    return scene


def read_scene(path: str | os.PathLike) -> SceneDescription:
    """Read a scene file.

    The file holds the ambient colour, the number of lights, one line per
    light (position and colour), then figures. Each figure line starts with
    the figure's type (SPHERE, BOX, TRIANGLE or QUADRANGLE); its geometry
    lines are followed by a line of seven optical coefficients.
    ``//`` starts a comment.
    """
    try:
        with open(path, encoding="utf-8") as file:
            text = file.read()
    except FileNotFoundError:
        raise SceneError("file not found") from None
    except OSError as exc:
        raise SceneError(str(exc)) from exc
    return _parse(_meaningful_lines(text))
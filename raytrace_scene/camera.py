"""A pinhole camera with world-to-screen matrices and ray emission."""

from __future__ import annotations

import math

import numpy as np

from raytrace_scene.geometry import Point3D, Ray

MAX_TILT = 80.0


def _rotate_around(axis: Point3D, vector: Point3D, angle: float) -> Point3D:
    """Rotate ``vector`` around ``axis`` by ``angle`` degrees."""
    n = axis.normalized()
    radians = math.radians(angle)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return vector * cos_a + n.cross(vector) * sin_a + n * (n.dot(vector) * (1 - cos_a))


class Camera:
    """A camera at ``position`` looking at ``view_point``.

    ``zf`` and ``zb`` are the near and far clipping distances; ``sw`` and
    ``sh`` the width and height of the screen placed at distance ``zf``.
    Angles are in degrees.
    """

    def __init__(
        self,
        position: Point3D,
        view_point: Point3D,
        up_vector: Point3D,
        zf: float,
        zb: float,
        sw: float,
        sh: float,
    ) -> None:
        self._position = position
        self._view_point = view_point
        self._up = up_vector
        self._x_axis = Point3D()
        self._zf = float(zf)
        self._zb = float(zb)
        self._sw = float(sw)
        self._sh = float(sh)
        self._refresh()

    # -- properties -------------------------------------------------------

    @property
    def position(self) -> Point3D:
        return self._position

    @position.setter
    def position(self, value: Point3D) -> None:
        self._position = value
        self._refresh()

    @property
    def view_point(self) -> Point3D:
        return self._view_point

    @view_point.setter
    def view_point(self, value: Point3D) -> None:
        self._view_point = value
        self._refresh()

    @property
    def up_vector(self) -> Point3D:
        """Unit up direction, kept perpendicular to the view direction."""
        return self._up

    @up_vector.setter
    def up_vector(self, value: Point3D) -> None:
        self._up = value
        self._refresh()

    @property
    def x_vector(self) -> Point3D:
        """Unit sideways direction of the camera."""
        return self._x_axis

    @property
    def zf(self) -> float:
        return self._zf

    @zf.setter
    def zf(self, value: float) -> None:
        self._zf = float(value)
        self._refresh()

    @property
    def zb(self) -> float:
        return self._zb

    @zb.setter
    def zb(self, value: float) -> None:
        self._zb = float(value)
        self._refresh()

    @property
    def sw(self) -> float:
        return self._sw

    @sw.setter
    def sw(self, value: float) -> None:
        self._sw = float(value)
        self._refresh()

    @property
    def sh(self) -> float:
        return self._sh

    @sh.setter
    def sh(self, value: float) -> None:
        self._sh = float(value)
        self._refresh()

    # -- matrices ---------------------------------------------------------

    def _refresh(self) -> None:
        self._update_axes()
        self._update_matrices()

    def _update_axes(self) -> None:
        z = self._view_point - self._position
        x = self._up.cross(z).normalized()
        y = z.cross(x).normalized()
        self._up = y
        self._x_axis = x

    def _update_matrices(self) -> None:
        p = self._position
        system = np.array([
            [1.0, 0.0, 0.0, -p.x],
            [0.0, 1.0, 0.0, -p.y],
            [0.0, 0.0, 1.0, -p.z],
            [0.0, 0.0, 0.0, 1.0],
        ])
        system_inverse = np.array([
            [1.0, 0.0, 0.0, p.x],
            [0.0, 1.0, 0.0, p.y],
            [0.0, 0.0, 1.0, p.z],
            [0.0, 0.0, 0.0, 1.0],
        ])

        z = (self._view_point - self._position).normalized()
        rotation = np.identity(4)
        rotation[0, :3] = list(self._x_axis)
        rotation[1, :3] = list(self._up)
        rotation[2, :3] = list(z)
        rotation_inverse = rotation.T.copy()

        zf, zb, sw, sh = self._zf, self._zb, self._sw, self._sh
        depth = zb - zf
        projection = np.array([
            [2 / sw * zf, 0.0, 0.0, 0.0],
            [0.0, 2 / sh * zf, 0.0, 0.0],
            [0.0, 0.0, zb / depth, -zf * zb / depth],
            [0.0, 0.0, 1.0, 0.0],
        ])

        self._camera_matrix = projection @ rotation @ system
        self._camera_matrix_inverse = system_inverse @ rotation_inverse

    def camera_matrix(self) -> np.ndarray:
        """World-to-screen matrix: projection, rotation and translation."""
        return self._camera_matrix.copy()

    def camera_matrix_inverse(self) -> np.ndarray:
        """Camera-to-world matrix (rotation and translation, no projection)."""
        return self._camera_matrix_inverse.copy()

    # -- motion -----------------------------------------------------------

    def move(self, step: Point3D) -> None:
        """Shift both the camera and the point it looks at."""
        self._position = self._position + step
        self._view_point = self._view_point + step
        self._refresh()

    def _turn_view(self, axis: Point3D, angle: float) -> None:
        direction = self._view_point - self._position
        self._view_point = _rotate_around(axis, direction, angle) + self._position
        self._refresh()

    def rotate_around_up(self, angle: float) -> None:
        """Turn the view direction around the up vector."""
        self._turn_view(self._up, angle)

    def rotate_around_x(self, angle: float) -> None:
        """Tilt the view direction around the sideways axis, at most 80 degrees."""
        angle = max(-MAX_TILT, min(MAX_TILT, angle))
        self._turn_view(self._x_axis, angle)

    def rotate_around_z(self, angle: float) -> None:
        """Roll the up vector around the view direction."""
        axis = self._view_point - self._position
        self._up = _rotate_around(axis, self._up, angle)
        self._refresh()

    def zoom(self, q: float) -> None:
        """Scale the screen distance by ``q``; non-positive factors are ignored."""
        if q <= 0:
            return
        self._zf *= q
        self._refresh()

    def emit_ray(self, x: float, y: float) -> Ray:
        """Ray from the eye through screen point (``x``, ``y``), in world space."""
        screen = np.array([x, y, self._zf, 1.0])
        world = self._camera_matrix_inverse @ screen
        world /= world[3]
        target = Point3D(float(world[0]), float(world[1]), float(world[2]))
        return Ray(self._position, target - self._position)
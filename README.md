# raytrace_scene

This package provides the parts a small ray tracer is built from:

- vector geometry
- figures that a ray can hit
- a camera that emits rays
- readers and writers for the render settings file and the scene description file

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Geometry

`raytrace_scene.geometry` provides the basic types.

`Point3D` is an immutable 3-vector with fields `x`, `y` and `z`. It supports:

- `+` and `-`
- multiplication by a number, from either side
- `/` by a number
- unary `-`
- iteration over its three components
- the methods `dot`, `cross`, `norm` and `normalized`

`normalized()` of a zero vector returns the zero vector.

The module also defines:

- `Ray(origin, direction)`: a ray. `is_miss()` is true when the direction is the zero vector.
- `Polygon(a, b, c)`: a triangle. It has a `points` tuple and can be iterated.
- `Figure`: the abstract base class for figures.

`polygon_normal_in_reflection(polygon, incident, normal, ab, ac, bc, radius)` intersects a ray with one triangle. It returns a `Ray` whose origin is the intersection point and whose direction is `normal`. It returns an all-zero `Ray()` in these cases:

- the ray does not hit the triangle
- the intersection lies more than `radius` from the first vertex
- the ray does not travel along the normal, that is, `direction · normal <= 0`

Every figure has two methods:

- `polygons()` returns the triangles that approximate its surface.
- `normal_in_reflection(incident)` returns the hit point and the surface normal there as a `Ray`, or `Ray()` on a miss.

The figures are:

| Class | Module | Surface |
|---|---|---|
| `Triangle(polygon)` | `raytrace_scene.triangle` | One triangle. Its normal is `AB × AC`. |
| `Quadrangle(p0, p1, p2, p3)` | `raytrace_scene.quadrangle` | Two triangles split along the `p1`–`p3` diagonal. `polygons()` returns `(p0, p1, p3)` and `(p2, p3, p1)`. |
| `Box(min_point, max_point)` | `raytrace_scene.box` | An axis-aligned box made of twelve triangles. |
| `Sphere(center, radius, accuracy=1)` | `raytrace_scene.sphere` | See below. |

`Sphere` is intersected analytically. Its `polygons()` starts from a 20-triangle grid and splits every triangle into four, `accuracy` times, so it returns `20 * 4**accuracy` triangles. A negative `accuracy` raises `ValueError`.

```python
from raytrace_scene.geometry import Point3D, Ray
from raytrace_scene.sphere import Sphere

sphere = Sphere(Point3D(0, 0, 0), 1.0)
hit = sphere.normal_in_reflection(Ray(Point3D(0, 0, -5), Point3D(0, 0, 1)))
print(hit.origin, hit.direction)   # (0, 0, -1) and (0, 0, -1)
```

## Camera

`raytrace_scene.camera.Camera(position, view_point, up_vector, zf, zb, sw, sh)` describes the viewer. The arguments are:

- `zf` and `zb`: the near and far clipping distances.
- `sw` and `sh`: the width and height of the screen, which sits at distance `zf`.

All of these are also settable properties. The camera also has these read-only properties:

- `up_vector`: kept as a unit vector perpendicular to the view direction.
- `x_vector`: the unit sideways axis.

The camera has these methods. Angles are in degrees.

- `move(step)` shifts both the position and the view point.
- `rotate_around_up(angle)` turns the view direction around the up vector.
- `rotate_around_x(angle)` tilts the view direction around the sideways axis. The angle is clamped to ±80°.
- `rotate_around_z(angle)` rolls the up vector around the view direction.
- `zoom(q)` multiplies `zf` by `q`. It ignores a `q` that is zero or negative.
- `emit_ray(x, y)` returns the ray that starts at the camera position and passes through the world point that corresponds to screen point `(x, y)` at depth `zf`.
- `camera_matrix()` returns a copy of the 4×4 world-to-screen matrix as a numpy array. It combines projection, rotation and translation.
- `camera_matrix_inverse()` returns a copy of the 4×4 camera-to-world matrix. It combines rotation and translation, without projection.

## Optical properties

`raytrace_scene.optics` holds three dataclasses:

- `LightSource(position, r, g, b)`: a point light with 8-bit colour channels.
- `SceneProps(ar, ag, ab, lights)`: the ambient colour and the list of lights.
- `FigureOpticProps(kdr, kdg, kdb, ksr, ksg, ksb, power)`: the diffuse and specular coefficients per colour component, and the Blinn exponent.

A colour channel outside 0..255 raises `ValueError`.

## Settings files

`raytrace_scene.config.ConfigKeeper` holds a `ConfigState` in its `state` attribute. `ConfigState` is a frozen dataclass with defaults. Its fields are:

- background colour: `br`, `bg`, `bb`
- `gamma`
- `depth`
- `quality`
- points and vectors: `eye`, `view`, `up`
- clipping distances: `zf`, `zb`
- screen size: `sw`, `sh`

`read_config(path)` loads the settings:

- Values are read in the field order above, one group per line.
- Empty lines are skipped, and `//` starts a comment.
- Lines after the ninth group are ignored.
- If the file ends early, the remaining settings keep their current values.
- A missing file, too few values on a line, or a value that is not a number raises `ConfigError`. An integer outside 0..255 raises it too.

`write_config(path)` saves the settings in the same format, with a comment on each line. It raises `ConfigError` if the file cannot be written.

```
168 217 255 // background colour
1.0         // gamma
3           // depth
0           // quality
0.0 0.0 0.0 // eye
10.0 0.0 0.0 // view point
0.0 0.0 1.0 // up vector
8.0 100.0   // zf zb
1.0 0.5625  // sw sh
```

## Scene files

`raytrace_scene.scene.read_scene(path)` reads a scene file. It returns a `SceneDescription` with three fields:

- `props`: a `SceneProps`.
- `figures`: a list of `Figure`.
- `optics`: a list of `FigureOpticProps`. `optics[i]` belongs to `figures[i]`.

The file holds these items in order. Empty lines are skipped, and `//` starts a comment.

1. The ambient colour `ar ag ab`.
2. The number of lights.
3. One line per light: `x y z r g b`.
4. The figures. Every line of a figure starts with its type keyword. The geometry lines come first, followed by one line of seven optical coefficients.

The geometry lines for each figure type are:

| Type | Geometry lines |
|---|---|
| `SPHERE` | the centre, then the radius |
| `BOX` | the minimum corner, then the maximum corner |
| `TRIANGLE` | three vertices |
| `QUADRANGLE` | four corners |

```
50 50 50
1
0 0 10 255 255 255
SPHERE 0 0 0
SPHERE 1
SPHERE 0.5 0.5 0.5 0.3 0.3 0.3 20
```

`SceneError` is a subclass of `ValueError`. It is raised in these cases:

- the file is missing
- a figure type is unknown
- a line of a different type appears inside an unfinished figure
- the file ends early
- a number is malformed
- a colour is outside 0..255

## What the package does not do

The package does not produce images. It contains no shading, no image output, no window and no command-line program. A renderer built on top of it has to do the following itself:

- call `Camera.emit_ray` for each pixel
- intersect the rays with the figures from `read_scene`
- apply the `FigureOpticProps` and `ConfigState` values
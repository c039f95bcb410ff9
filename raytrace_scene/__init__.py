"""Vector geometry, ray-hittable figures, a camera, and settings and scene file readers for a ray tracer."""

__version__ = "0.1.0"
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytrace_scene"
version = "0.1.0"
description = "Scene geometry, camera and configuration files for a simple ray tracer"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["ray tracing", "geometry", "camera", "scene", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raytrace_scene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tubeflight"
version = "0.1.0"
description = "Scene math for a tube fly-through: splines, cameras, frusta, lights, procedural meshes and text layout"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "graphics", "catmull-rom", "frustum", "camera", "mesh", "poisson-disk", "quaternion"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["tubeflight"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genjutsu"
version = "0.1.0"
description = "Gaussian splat clouds: PLY I/O, orbit camera, a small multi-view model and a GaussianDreamer client"
requires-python = ">=3.10"
keywords = ["gaussian", "splat", "ply", "3d", "point-cloud"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]
dependencies = [
    "numpy",
    "pillow",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["genjutsu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

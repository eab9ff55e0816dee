[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelworlds"
version = "0.1.0"
description = "Voxel world building blocks: terrain noise, splines, chunk storage, spatial loops and AABB physics."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "terrain", "noise", "simplex", "perlin", "aabb", "chunk"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelworlds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

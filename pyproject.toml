[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrainkit"
version = "0.1.0"
description = "Procedural terrain heightmaps: diamond-square, Voronoi, erosion and terrain evaluation"
requires-python = ">=3.10"
keywords = ["terrain", "heightmap", "procedural", "diamond-square", "voronoi", "erosion"]
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
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
    "scipy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
terrainkit = "terrainkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["terrainkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

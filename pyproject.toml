[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilegrid"
version = "0.16.0"
description = "Hexagonal grid coordinates, world projection and neighbor queries for tile maps, plus square-grid directions."
requires-python = ">=3.10"
dependencies = []
keywords = ["tilemap", "hexagon", "hex-grid", "grid", "game", "coordinates"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubray"
version = "0.1.0"
description = "Scene parsing, XPM textures, player movement, sprite projection and BMP screenshots for grid-based ray-casting mazes"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "xpm", "bmp", "maze", "game", "scene"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

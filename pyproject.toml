[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickengine"
version = "0.1.0"
description = "Building blocks for 2D games on pygame: entities, scenes, layered rendering, textures and music"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "entities", "pygame", "scenes"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["brickengine"]

[tool.pytest.ini_options]
addopts = "-ra"

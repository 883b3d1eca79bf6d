[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roguekit"
version = "1.0.0"
description = "Building blocks for roguelike games: colours, geometry, Perlin noise, REXPaint sprites, retained-mode GUI controls and an entity-component-system."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "ecs", "perlin", "rexpaint", "gui", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roguekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

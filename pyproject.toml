[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roguekit"
version = "0.1.0"
description = "Roguelike building blocks: colours, dice, A* path finding, XML-like and binary save files, and character-grid terminals."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "astar", "pathfinding", "terminal", "dice"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roguekit"]

[tool.pytest.ini_options]
addopts = "-ra"

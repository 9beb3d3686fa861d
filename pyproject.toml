[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "draughtscan"
version = "0.1.0"
description = "Core building blocks of a draughts engine: board geometry, positions, move notation, scores, transposition table and settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["draughts", "checkers", "board-game", "engine", "bitboard"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["draughtscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

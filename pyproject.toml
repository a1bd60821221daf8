[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noughts"
version = "0.1.0"
description = "Tic-tac-toe against the computer: minimax, blocking, heuristic and magic-square opponents, in the terminal or a window"
requires-python = ">=3.10"
keywords = ["tic-tac-toe", "noughts and crosses", "minimax", "game", "magic square"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
noughts = "noughts.console:main"
noughts-gui = "noughts.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["noughts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

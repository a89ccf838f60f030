[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dicecolumns"
version = "0.1.0"
description = "A two-player terminal dice game played on 3x3 boards, with character abilities and saved matches"
requires-python = ">=3.10"
dependencies = []
keywords = ["dice", "game", "terminal", "board-game", "two-player"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dicecolumns = "dicecolumns.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["dicecolumns"]

[tool.pytest.ini_options]
addopts = "-ra"

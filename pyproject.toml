[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twentyfortyeight"
version = "1.0.0"
description = "The 2048 sliding-tile puzzle: a game engine with a terminal front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "game", "puzzle", "terminal"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
twentyfortyeight = "twentyfortyeight.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["twentyfortyeight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "einsteinpuzzle"
version = "0.1.0"
description = "Data handling for a logic puzzle game: config tables, settings storage, top scores, tokenizing and binary helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "einstein", "logic", "config", "high-scores"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["einsteinpuzzle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

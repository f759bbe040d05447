[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexmaze"
version = "0.1.0"
description = "Generate random hexagonal mazes, solve them by breadth-first search and render them as PostScript"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "hexagonal", "postscript", "union-find", "bfs", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
hexmaze = "hexmaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hexmaze"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubesolve"
version = "0.1.0"
description = "Rubik's Cube models with breadth-first, depth-first and iterative-deepening solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "puzzle", "solver", "bfs", "iddfs", "bitboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
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
cubesolve = "cubesolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubesolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritelab"
version = "0.1.0"
description = "Game logic for small 2D sprite games: sliding puzzle, snake, particles, sprite sheets and transforms"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "sliding-puzzle", "snake", "sprite", "particles", "bmp", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["spritelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubemodels"
version = "0.1.0"
description = "Three models of a 3x3 Rubik's Cube sharing one interface: nested faces, a flat sticker list and a bitboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "puzzle", "bitboard", "cube", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["cubemodels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colorlines"
version = "1.0.0"
description = "Color Lines puzzle game: move balls across a grid to form lines of five of the same colour"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "color lines", "lines", "five in a row", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
colorlines-classic = "colorlines.classic.app:main"
colorlines-fiveballs = "colorlines.fiveballs.app:main"

[tool.hatch.build.targets.wheel]
packages = ["colorlines"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "michaelk"
version = "0.1.0"
description = "A small terminal farming game: plant pumpkins and melons, water them, pull weeds and harvest what ripens."
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["game", "terminal", "farming", "ascii", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
michaelk = "michaelk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["michaelk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

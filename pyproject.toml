[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weathermap"
version = "0.1.0"
description = "Read a weather-system configuration and city locations, and draw the cities on a bordered coordinate grid."
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "map", "grid", "cities", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weathermap = "weathermap.app:main"
weathermap-menu = "weathermap.menu:main"
weathermap-cities = "weathermap.cities:main"
weathermap-grid = "weathermap.grid:main"

[tool.hatch.build.targets.wheel]
packages = ["weathermap"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

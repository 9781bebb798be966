[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lemin"
version = "0.1.0"
description = "Ant farm simulator: route ants through a colony of rooms and tunnels and print each turn's moves"
requires-python = ">=3.10"
dependencies = []
keywords = ["lem-in", "ant farm", "graph", "pathfinding", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
lemin = "lemin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lemin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

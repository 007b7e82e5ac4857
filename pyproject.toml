[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floodmaze"
version = "0.1.0"
description = "Interactive flood-fill maze solver: a robot finds the centre of a 5x5 maze and walks back to the start."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "flood-fill", "micromouse", "robot", "pathfinding", "simulation"]
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
floodmaze = "floodmaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["floodmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

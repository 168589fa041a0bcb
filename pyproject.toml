[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beesolve"
version = "0.1.0"
description = "Solutions to a collection of classic programming-judge exercises, usable as functions or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "exercises", "judge", "algorithms", "puzzles"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
beesolve = "beesolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["beesolve"]

[tool.pytest.ini_options]
addopts = "-ra"

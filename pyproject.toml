[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulertools"
version = "1.0.0"
description = "Number-theory, prime, digit and combinatorics helpers with solutions to classic recreational mathematics problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "number theory", "combinatorics", "continued fractions", "poker", "puzzles", "mathematics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eulertools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

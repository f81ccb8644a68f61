[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solutions to a collection of short competitive-programming problems, as functions and a command-line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "puzzles", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[project.scripts]
contestkit = "contestkit.cli:main"

[tool.setuptools.packages.find]
include = ["contestkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

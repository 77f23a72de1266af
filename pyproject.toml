[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoteca"
version = "0.1.0"
description = "Classic algorithms in plain Python: combinatorics, number theory, backtracking, sorting, strings, geometry, graphs, games and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "combinatorics",
    "number-theory",
    "backtracking",
    "sorting",
    "string-matching",
    "graphs",
    "geometry",
    "minimax",
    "dynamic-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algoteca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algosolve"
version = "0.1.0"
description = "Classic backtracking, dynamic programming and greedy algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "backtracking", "dynamic-programming", "greedy", "knapsack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["algosolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

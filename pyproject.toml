[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynsssp"
version = "0.1.0"
description = "Single-source shortest paths on static and changing graphs, with incremental updates, block-distributed Dijkstra and balanced partitioning"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "shortest-path",
    "dijkstra",
    "sssp",
    "dynamic-graph",
    "incremental",
    "metis",
    "matrix-market",
    "partitioning",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
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
dynsssp = "dynsssp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dynsssp"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

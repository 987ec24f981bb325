[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dlmasim"
version = "0.1.0"
description = "Diffusion-limited mass aggregation, random site percolation and random geometric graph simulations in periodic boxes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "aggregation",
    "dlma",
    "percolation",
    "brownian motion",
    "random geometric graph",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dlmasim"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amalgamkit"
version = "0.1.0"
description = "Building blocks for AMaLGaM-IDEA style estimation-of-distribution optimisation"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "optimization",
    "evolutionary-algorithms",
    "estimation-of-distribution",
    "amalgam",
    "gaussian",
    "cholesky",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["amalgamkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

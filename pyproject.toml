[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brachistodp"
version = "0.1.0"
description = "Dynamic-programming solver for a discretised brachistochrone curve, with the control logic of a small simulation front end"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["brachistochrone", "dynamic programming", "physics", "optimal control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brachistodp = "brachistodp.app:main"

[tool.hatch.build.targets.wheel]
packages = ["brachistodp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

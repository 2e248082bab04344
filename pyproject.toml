[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "rowscols"
version = "0.1.0"
description = "A minimal CSV analysis tool: structure detection, column typing, metadata files and summary statistics"
requires-python = ">=3.10"
keywords = ["csv", "data-analysis", "statistics", "terminal"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rowscols = "rowscols.app:main"

[tool.setuptools.packages.find]
include = ["rowscols*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

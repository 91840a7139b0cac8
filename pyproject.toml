[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcimglab"
version = "0.1.0"
description = "RC/RL step-response simulation with SVG plots, and binary PGM greyscale image filters"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "circuit",
    "rc",
    "rl",
    "transient",
    "step-response",
    "simulation",
    "svg",
    "pgm",
    "image-processing",
    "grayscale",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rcimglab = "rcimglab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rcimglab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

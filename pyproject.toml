[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picroute"
version = "0.1.0"
description = "Grid router for photonic integrated circuits minimising propagation, crossing and bending loss"
requires-python = ">=3.10"
dependencies = []
keywords = ["routing", "photonics", "pic", "eda", "a-star", "maze-routing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
picroute = "picroute.cli:main"
picroute-generate = "picroute.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["picroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isolated"
version = "1.0.0"
description = "Survival simulation building blocks: voxel chunks, temporal LOD, entity needs and metabolism, and human physiology models."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "survival", "physiology", "voxel", "ecs", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["isolated"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

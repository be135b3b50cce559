[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bulletbalance"
version = "0.1.0"
description = "A small entity-component circle simulation with spatial-hash overlap detection, drawn with pygame"
requires-python = ">=3.10"
keywords = ["game", "simulation", "ecs", "spatial-hash", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bulletbalance = "bulletbalance.main:main"

[tool.hatch.build.targets.wheel]
packages = ["bulletbalance"]

[tool.pytest.ini_options]
addopts = "-ra"

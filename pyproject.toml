[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satsim"
version = "0.1.0"
description = "Component models for a small satellite simulation: gravity, celestial bodies, electrical power and attitude control"
requires-python = ">=3.10"
keywords = ["satellite", "simulation", "spacecraft", "attitude-control", "power-system", "gravity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
satsim = "satsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["satsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanoisim"
version = "0.1.0"
description = "Discrete-event simulation of package routing through a network of stack-based warehouses"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "logistics", "warehouse", "routing"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hanoisim = "hanoisim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["hanoisim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

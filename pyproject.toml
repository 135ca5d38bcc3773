[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sevens"
version = "0.1.0"
description = "Monte Carlo simulator for the card game Sevens and a spades-led variant, comparing play strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["sevens", "fan tan", "card game", "simulation", "monte carlo", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sevens = "sevens.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sevens"]

[tool.pytest.ini_options]
addopts = "-ra"

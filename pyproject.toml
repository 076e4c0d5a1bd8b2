[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mtgsim"
version = "0.1.0"
description = "A rules engine for simulating games of Magic: The Gathering"
requires-python = ">=3.10"
dependencies = []
keywords = ["magic-the-gathering", "card-game", "simulator", "rules-engine", "game-state"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mtgsim = "mtgsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mtgsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

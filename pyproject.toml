[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "batalha"
version = "0.1.0"
description = "Team battle simulator with characters, attack weapons and defensive gear"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "battle", "rpg", "game", "teams"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
batalha = "batalha.principal:main"

[tool.hatch.build.targets.wheel]
packages = ["batalha"]

[tool.pytest.ini_options]
addopts = "-ra"

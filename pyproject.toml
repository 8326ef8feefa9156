[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skirmish"
version = "1.0.0"
description = "A small turn-based battle adventure played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "turn-based", "terminal", "battle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skirmish = "skirmish.game:main"

[tool.hatch.build.targets.wheel]
packages = ["skirmish"]

[tool.pytest.ini_options]
addopts = "-ra"

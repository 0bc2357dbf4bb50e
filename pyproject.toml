[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oca"
version = "0.1.0"
description = "The Game of the Goose (Juego de la Oca) for the terminal"
requires-python = ">=3.10"
keywords = ["oca", "goose", "board game", "dice", "juego de la oca"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oca = "oca.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

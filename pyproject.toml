[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sinjoh_plat"
version = "0.1.0"
description = "Data structures and parsers for Pokémon Platinum map file formats"
requires-python = ">=3.10"
dependencies = []
keywords = ["nds", "pokemon", "platinum", "narc", "map", "parser", "file-formats"]
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
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sinjoh_plat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

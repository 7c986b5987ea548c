[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokedex-fr"
version = "0.0.2"
description = "Interactive terminal Pokédex of first-generation Pokémon, grouped by type, in French"
requires-python = ">=3.10"
keywords = ["pokedex", "pokemon", "terminal", "game", "french"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "termcolor>=2.1.0",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pokedex-fr = "pokedex_fr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pokedex_fr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chavesarena"
version = "0.1.0"
description = "Team battle simulator with the Chaves cast, plus small geometry, trigonometry and graph utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "battle", "game", "graph", "geometry", "trigonometry"]
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
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chavesarena = "chavesarena.principal:main"
chavesarena-circulo = "chavesarena.circulo:main"
chavesarena-matematica = "chavesarena.matematica:main"
chavesarena-grafo = "chavesarena.grafo:main"

[tool.hatch.build.targets.wheel]
packages = ["chavesarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

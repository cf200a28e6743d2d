[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadkit"
version = "0.1.0"
description = "Game-loop building blocks: colors, 2D geometry, generational storage, sprite animation, shader includes, configuration and input state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "gamedev", "geometry", "color", "animation", "input", "shader"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadkit"]

[tool.hatch.build.targets.sdist]
include = ["quadkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

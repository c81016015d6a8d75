[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "littleengine"
version = "0.1.0"
description = "A small game engine core: a frame clock, tagged console logging, a game interface, a pygame window and an application loop."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "game-loop", "pygame", "timing", "logging"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["littleengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

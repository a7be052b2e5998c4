[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelyard"
version = "0.1.0"
description = "Small pygame games and demos: a sprite brawler, snake, a spinning cube, an oval, a music player and a text banner."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pygame", "game", "snake", "sprites", "animation", "demo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pygame",
]

[project.scripts]
pixelyard = "pixelyard.game:main"
pixelyard-snake = "pixelyard.snake:main"
pixelyard-cube = "pixelyard.cube:main"
pixelyard-oval = "pixelyard.oval:main"
pixelyard-music = "pixelyard.music:main"
pixelyard-text = "pixelyard.text:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelyard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexagame"
version = "0.1.0"
description = "A hexagonal-board capture game for two players or one player against the computer"
requires-python = ">=3.10"
keywords = ["game", "board game", "hexagon", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexagame = "hexagame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hexagame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

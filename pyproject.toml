[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xonix"
version = "0.1.0"
description = "Game logic for a Xonix-style arcade game: grid board, player trail, bouncing enemies and area capture"
requires-python = ">=3.10"
dependencies = []
keywords = ["xonix", "arcade", "game", "grid", "flood-fill"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xonix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

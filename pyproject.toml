[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monofighter"
version = "0.1.0"
description = "Frame-by-frame logic for a one-on-one fighting game: attack data, timing, camera, input history, rounds and scenes"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "fighting-game", "game-logic", "frame-data", "simulation"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monofighter"]

[tool.pytest.ini_options]
addopts = "-ra"

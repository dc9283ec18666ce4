[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rodgame"
version = "0.1.0"
description = "Game-logic core for a wave-based shooting gallery: object pools, scenes, events, collisions, items, power-ups and enemy waves."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "object-pool", "scene-manager", "event-broadcaster", "power-ups", "enemy-waves"]
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
packages = ["rodgame"]

[tool.pytest.ini_options]
addopts = "-ra"

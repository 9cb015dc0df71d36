[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravdash"
version = "0.1.0"
description = "Game logic for a gravity-flipping arcade game: menus, settings, controls, animation and statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "menu", "settings", "animation", "bezier"]
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
packages = ["gravdash"]

[tool.pytest.ini_options]
addopts = "-ra"

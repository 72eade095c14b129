[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "betweentrees"
version = "0.1.0"
description = "A small visual-novel engine with a dialogue box, scripted event queue, actors and audio"
requires-python = ">=3.10"
keywords = ["visual novel", "game", "dialogue", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
between-the-trees = "betweentrees.main:main"

[tool.hatch.build.targets.wheel]
packages = ["betweentrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

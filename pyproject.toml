[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixi"
version = "0.1.0"
description = "A tiny arcade with Stacker and Snake, driven by a small state-machine game loop."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "snake", "stacker", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixi = "pixi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

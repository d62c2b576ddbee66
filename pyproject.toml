[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spotterm"
version = "0.20.7"
description = "State model, data caches and UI state for a terminal music player"
requires-python = ">=3.10"
dependencies = [
    "cachetools",
]
keywords = ["music", "player", "terminal", "tui", "playlist"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spotterm"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ncspot"
version = "0.1.0"
description = "Media models and share-link parsing for a terminal music streaming client"
requires-python = ">=3.11"
keywords = ["music", "spotify", "playlist", "podcast", "uri"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ncspot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

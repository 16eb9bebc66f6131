[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyvi"
version = "0.1.0"
description = "A small modal terminal text editor with vi-style keys"
requires-python = ">=3.10"
keywords = ["editor", "vi", "terminal", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyvi = "tinyvi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyvi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

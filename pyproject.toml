[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuit"
version = "0.1.0"
description = "Cell-grid terminals, views, styles and ANSI renderers for text user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "ansi", "cells", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuit"]

[tool.pytest.ini_options]
addopts = "-ra"

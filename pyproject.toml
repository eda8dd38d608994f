[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphquest"
version = "0.1.0"
description = "A console text adventure: walk a graph of scenarios, collect items and reach a final scenario before time runs out."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text adventure", "graph", "console", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphquest = "graphquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["graphquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "artifactinv"
version = "0.1.0"
description = "Inventory of archaeological artifacts with CSV or JSON storage, filtering and undo/redo"
requires-python = ">=3.10"
dependencies = []
keywords = ["archaeology", "artifacts", "inventory", "catalogue", "csv", "json", "undo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Sociology :: History",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
artifactinv = "artifactinv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["artifactinv"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtools"
version = "0.1.0"
description = "Small text and data utilities: pangram checks, slugs, complex numbers, a circular buffer and a line editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["pangram", "slug", "complex numbers", "circular buffer", "ring buffer", "line editor", "regex"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labtools-pangram = "labtools.pangram:main"

[tool.hatch.build.targets.wheel]
packages = ["labtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

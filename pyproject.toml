[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsadrills"
version = "0.1.0"
description = "Small worked exercises in loops, number systems, patterns, recursion and sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "recursion", "sorting", "patterns", "exercises", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsadrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

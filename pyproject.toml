[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "naloge"
version = "0.1.0"
description = "Small programming exercises: list, string, number and matrix routines, plus scripted examples that print their results."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "education", "practice"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.scripts]
naloge = "naloge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["naloge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "respcommands"
version = "0.1.0"
description = "Builders for Redis commands: argument lists, reply kinds and error classification, independent of any transport."
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "resp", "commands", "database"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["respcommands"]

[tool.hatch.build.targets.sdist]
include = ["respcommands", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

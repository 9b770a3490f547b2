[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitable"
version = "0.1.0"
description = "Shell token model, pipeline command-table parser and small string, formatting and line-reading utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "tokens", "pipeline", "command table", "printf", "line reader"]
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
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minitable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

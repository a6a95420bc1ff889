[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "komi"
version = "0.1.0"
description = "Tokens, syntax trees, a Pratt parser and value representation for a small Korean-keyword expression language."
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "parser", "pratt", "korean", "language"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Korean",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["komi"]

[tool.pytest.ini_options]
addopts = "-ra"

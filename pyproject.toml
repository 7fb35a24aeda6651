[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adatree"
version = "0.1.0"
description = "Syntax tree nodes and an indented tree printer for a small Ada-like language"
requires-python = ">=3.10"
dependencies = []
keywords = ["ada", "ast", "syntax-tree", "pretty-printer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adatree"]

[tool.pytest.ini_options]
addopts = "-ra"

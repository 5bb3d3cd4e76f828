[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilang"
version = "0.1.0"
description = "Abstract syntax tree, scoped symbol tables and semantic checks for a small imperative teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ast", "symbol-table", "semantic-analysis", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
packages = ["minilang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

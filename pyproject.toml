[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kplfront"
version = "0.1.0"
description = "Front end for the KPL teaching language: character classes, tokens, scanner, symbol table and symbol-table printer"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "scanner", "lexer", "symbol table", "kpl", "pascal"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kplfront"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kplscan"
version = "0.1.0"
description = "Lexical scanner for the KPL teaching language, with classic and extended dialects"
requires-python = ">=3.10"
dependencies = []
keywords = ["kpl", "scanner", "lexer", "tokenizer", "compiler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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

[project.scripts]
kplscan = "kplscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kplscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

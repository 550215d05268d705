[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgnkit"
version = "0.1.0"
description = "Parse PGN chess game files into tags, moves, comments, annotations and variations"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "pgn", "san", "parser", "fen", "bitboard"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pgnkit = "pgnkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pgnkit"]

[tool.pytest.ini_options]
addopts = "-ra"

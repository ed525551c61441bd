[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yulecode"
version = "1.0.0"
description = "Solvers for a month of festive programming puzzles: captchas, spirals, knot hashes, duets, tubes, particles and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "knot-hash", "solver", "programming-puzzles"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yulecode = "yulecode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yulecode"]

[tool.hatch.build.targets.sdist]
include = ["yulecode", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "intcheckers"
version = "0.1.0"
description = "International (10x10) checkers with a minimax computer opponent, playable in a terminal or a window"
requires-python = ">=3.10"
keywords = ["checkers", "draughts", "international draughts", "minimax", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
intcheckers = "intcheckers.main:main"

[tool.hatch.build.targets.wheel]
packages = ["intcheckers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

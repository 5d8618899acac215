[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "checkersai"
version = "0.1.0"
description = "Checkers on an 8x8 board, played against a friend or a minimax computer opponent"
requires-python = ">=3.10"
keywords = ["checkers", "draughts", "minimax", "alpha-beta", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
checkersai = "checkersai.app:main"

[tool.hatch.build.targets.wheel]
packages = ["checkersai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardmatch"
version = "0.1.0"
description = "A card matching puzzle: play field cards one value away from the pile card, draw from a stack, undo moves"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "solitaire", "puzzle", "game", "undo", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
cardmatch = "cardmatch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cardmatch"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

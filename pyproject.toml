[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termjack"
version = "0.1.0"
description = "A terminal blackjack game with coloured ASCII cards, betting and insurance"
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "cards", "terminal", "game", "casino"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termjack = "termjack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termjack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

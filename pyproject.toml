[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigames"
version = "0.1.0"
description = "Four small terminal games: tic-tac-toe, snake-water-gun, a detective mystery and a space battle."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "terminal", "tic-tac-toe", "text-adventure", "console"]
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
tictactoe = "minigames.tictactoe:main"
snakewatergun = "minigames.snakewatergun:main"
detective = "minigames.detective:main"
spacebattle = "minigames.spacebattle:main"

[tool.hatch.build.targets.wheel]
packages = ["minigames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

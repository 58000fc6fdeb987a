[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questkit"
version = "0.1.0"
description = "Game data models and gameplay logic for role-playing games: items, inventories, dialogues, quests, enemies and NPCs."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "quest", "dialogue", "inventory", "game-data", "npc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["questkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glowquest"
version = "0.1.0"
description = "Game logic for a top-down action adventure: tiles, entities, combat, enemy AI, quests, saves and synthesized sound effects."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "adventure", "rpg", "tile-based", "game-logic", "chiptune"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glowquest"]

[tool.hatch.build.targets.sdist]
include = ["glowquest", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

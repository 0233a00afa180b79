"""Game logic for a top-down tile-based action adventure: world, entities, combat, quests, saves and sound synthesis."""

__version__ = "0.1.0"
"""Roguelike building blocks: colours, dice, A* path finding, save files and character-grid terminals."""

__version__ = "0.1.0"
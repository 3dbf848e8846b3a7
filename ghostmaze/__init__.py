"""Simulation core for a first-person ghost maze game: vectors, collisions, config, maze, player, ghosts and world."""

__version__ = "0.1.0"
"""Labyrinth - console maze game."""

__version__ = "1.0.0"

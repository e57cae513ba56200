"""Labyrinth crawler simulation."""

__version__ = "1.0.0"

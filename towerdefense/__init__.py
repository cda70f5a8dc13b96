"""Vectors, collisions, scenes, sprites, resources, audio, a game engine, enemies and bullets for a pygame tower defense game."""

__version__ = "0.1.0"
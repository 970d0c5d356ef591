"""Game logic for a top-down arcade space shooter: vectors, collision masks, ships, weapons, projectiles, explosions and particles."""

__version__ = "0.1.0"
"""Grid-based game logic for a Xonix-style arcade game."""

__version__ = "0.1.0"
__all__ = ["board", "cell", "enemy", "levels", "objects", "player"]
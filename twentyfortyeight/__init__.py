"""The 2048 sliding-tile puzzle: game engine and terminal front end."""

__version__ = "1.0.0"
__all__ = ["__version__"]
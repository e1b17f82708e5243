"""Hexagonal-board capture game with a pygame window, a computer opponent and a best-score table."""

__version__ = "0.1.0"
__all__ = ["__version__"]
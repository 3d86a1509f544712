"""Small 2D game toolkit: geometry helpers, Catch the Cat and a chess move generator with search."""

__version__ = "0.1.0"
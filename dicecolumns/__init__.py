"""Two-player terminal dice game on 3x3 boards with character abilities and saved matches."""

__version__ = "0.1.0"
__all__ = ["__version__"]
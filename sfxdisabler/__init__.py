"""Disable or restore note effects and background animations in a game installation."""

__version__ = "1.0.0"
__all__ = ["__version__"]
"""A small arcade space shooter whose game logic runs with or without a window."""

__version__ = "0.1.0"
__all__ = ["__version__"]
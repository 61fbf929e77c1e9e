"""A turn-based zoo management simulation with a terminal shell."""

__version__ = "0.1.0"
"""stickman: terminal animation player with differential redraw."""

__version__ = "1.0.0"

__all__ = ["__version__"]

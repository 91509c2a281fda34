"""Notes sidebar logic and frameless window chrome behaviour."""

__version__ = "0.1.0"
__all__ = ["sidebar", "window"]
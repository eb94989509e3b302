"""Escape-room terminal that unlocks when a matching hack file appears on a USB stick."""

__version__ = "0.1.0"
__all__ = ["__version__"]
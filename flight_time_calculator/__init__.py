"""Flight Time Calculator: add and subtract hours and minutes."""

__version__ = "0.1.0"

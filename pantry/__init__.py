"""Pantry - food inventory and shopping session domain core."""

__version__ = "0.1.0"

"""Quake Locator - find earthquakes near a place and view them on a map."""

__version__ = "0.1.0"

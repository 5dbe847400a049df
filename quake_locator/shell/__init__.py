"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS API client (HTTP)
- Nominatim geocoding client (HTTP)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from quake_locator.shell.usgs_client import EarthquakeQuery, USGSClient
from quake_locator.shell.geocoding_client import GeocodingClient
from quake_locator.shell.config_loader import load_config

__all__ = [
    "EarthquakeQuery",
    "USGSClient",
    "GeocodingClient",
    "load_config",
]

"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; business logic is in the core module.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

import requests

from quake_locator.core.config import USGS_API_URL


logger = logging.getLogger(__name__)


# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30


@dataclass
class EarthquakeQuery:
    """Parameters for a radius search against the USGS API.

    Attributes:
        start_date: First day of the range (inclusive)
        end_date: Last day of the range (inclusive)
        min_magnitude: Minimum magnitude to fetch
        latitude: Search center latitude
        longitude: Search center longitude
        max_radius_km: Search radius in kilometers
    """
    start_date: date
    end_date: date
    min_magnitude: float
    latitude: float
    longitude: float
    max_radius_km: float


class USGSClient:
    """Client for fetching earthquake data from USGS API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = USGS_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: USGS query endpoint
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def _build_params(self, query: EarthquakeQuery) -> dict[str, str]:
        """Build query parameters for a radius search.

        The end date is sent as the last second of that day so the
        range includes it.

        Args:
            query: Query parameters

        Returns:
            Dict of URL query parameters
        """
        return {
            "format": "geojson",
            "starttime": query.start_date.isoformat(),
            "endtime": f"{query.end_date.isoformat()}T23:59:59",
            "minmagnitude": str(query.min_magnitude),
            "latitude": str(query.latitude),
            "longitude": str(query.longitude),
            "maxradiuskm": str(query.max_radius_km),
        }

    def _get(self, params: dict[str, str]) -> dict[str, Any]:
        """Perform the GET request and decode the JSON body.

        Raises:
            requests.RequestException: If the request fails
            ValueError: If the body is not JSON
        """
        response = requests.get(
            self.base_url,
            params=params,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def fetch_earthquakes(self, query: EarthquakeQuery) -> dict[str, Any]:
        """Fetch earthquakes around a point within a date range.

        This method performs HTTP I/O.

        Args:
            query: Query parameters

        Returns:
            Raw GeoJSON response from USGS

        Raises:
            requests.RequestException: If the request fails
        """
        params = self._build_params(query)

        logger.info(
            "Fetching earthquakes from USGS",
            extra={"params": params},
        )

        data = self._get(params)

        logger.info(
            "Fetched %d earthquakes from USGS",
            len(data.get("features", [])),
        )

        return data

    def fetch_latest(self) -> dict[str, Any]:
        """Fetch the single most recent earthquake worldwide.

        Returns:
            Raw GeoJSON response with at most one feature

        Raises:
            requests.RequestException: If the request fails
        """
        params = {
            "format": "geojson",
            "orderby": "time",
            "limit": "1",
        }

        logger.debug("Fetching latest earthquake from USGS")

        return self._get(params)

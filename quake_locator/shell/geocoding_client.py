"""Geocoding Client - Imperative Shell.

Resolves place names to coordinates, and coordinates back to a
country name, using the Nominatim (OpenStreetMap) HTTP API.
"""

import logging
from typing import Any

import requests

from quake_locator.core.config import DEFAULT_USER_AGENT, NOMINATIM_URL
from quake_locator.core.geo import Coordinates


logger = logging.getLogger(__name__)


# Default timeout for geocoder requests (seconds)
DEFAULT_TIMEOUT = 10


class GeocodingClient:
    """Client for the Nominatim search and reverse endpoints.

    This is part of the imperative shell - it handles HTTP I/O.
    Only the first match is ever used.
    """

    def __init__(
        self,
        base_url: str = NOMINATIM_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: int = DEFAULT_TIMEOUT,
        language: str = "en",
    ) -> None:
        """Initialize geocoding client.

        Args:
            base_url: Nominatim base URL
            user_agent: User-Agent header, required by Nominatim usage policy
            timeout: Request timeout in seconds
            language: Preferred language for returned names
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.language = language

    def _get(self, path: str, params: dict[str, Any]) -> Any:
        response = requests.get(
            f"{self.base_url}/{path}",
            params={**params, "format": "json"},
            headers={
                "User-Agent": self.user_agent,
                "Accept-Language": self.language,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def geocode(self, text: str) -> Coordinates | None:
        """Resolve a free-text place name to coordinates.

        This method performs HTTP I/O.

        Args:
            text: Place name, e.g. "Warsaw"

        Returns:
            Coordinates of the first match, or None if nothing matched

        Raises:
            requests.RequestException: If the request fails
        """
        results = self._get("search", {"q": text, "limit": 1})

        if not results:
            logger.info("No geocoding match for %r", text)
            return None

        first = results[0]
        coordinates = Coordinates(
            latitude=float(first["lat"]),
            longitude=float(first["lon"]),
        )

        logger.info(
            "Geocoded %r to (%.4f, %.4f)",
            text,
            coordinates.latitude,
            coordinates.longitude,
        )
        return coordinates

    def reverse_country(self, latitude: float, longitude: float) -> str | None:
        """Find the country containing a point.

        This method performs HTTP I/O.

        Returns:
            Country name, or None if the point is not in any country
            (e.g. open ocean)

        Raises:
            requests.RequestException: If the request fails
        """
        result = self._get(
            "reverse",
            {"lat": latitude, "lon": longitude, "zoom": 3},
        )

        # Nominatim answers {"error": "Unable to geocode"} for no match
        if not isinstance(result, dict) or "error" in result:
            return None

        return result.get("address", {}).get("country")

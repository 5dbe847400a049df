"""Geographic helpers - Pure functions.

Coordinates returned by the geocoder and great-circle distances
between them and earthquake epicenters.
"""

import math
from dataclasses import dataclass

from quake_locator.core.earthquake import EarthquakeRecord


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinates:
    """A point on the globe.

    Attributes:
        latitude: Degrees north, [-90, 90]
        longitude: Degrees east, [-180, 180]
    """
    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        """True if both components are inside their ranges."""
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_from(record: EarthquakeRecord, center: Coordinates) -> float:
    """Distance in km from a search center to an epicenter."""
    return calculate_distance(
        center.latitude,
        center.longitude,
        record.latitude,
        record.longitude,
    )

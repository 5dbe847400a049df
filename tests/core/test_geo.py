"""Unit tests for geographic calculations.

Pure function tests - no mocks needed, fast execution.
"""

import pytest

from quake_locator.core.earthquake import EarthquakeRecord
from quake_locator.core.geo import (
    Coordinates,
    calculate_distance,
    distance_from,
)


@pytest.fixture
def sample_record():
    """Create a sample earthquake for testing."""
    return EarthquakeRecord(
        magnitude=4.0,
        place="Test Location",
        occurred_at_epoch_millis=1703001600000,
        latitude=37.7749,
        longitude=-122.4194,
    )


class TestCalculateDistance:
    """Tests for calculate_distance() Haversine implementation."""

    def test_same_point_returns_zero(self):
        """Distance from point to itself should be zero."""
        distance = calculate_distance(37.7749, -122.4194, 37.7749, -122.4194)
        assert distance == pytest.approx(0.0, abs=0.001)

    def test_known_distance_sf_to_la(self):
        """SF to LA should be approximately 559 km."""
        distance = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        assert distance == pytest.approx(559, rel=0.02)

    def test_symmetric(self):
        """Distance should be the same in both directions."""
        d1 = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        d2 = calculate_distance(34.0522, -118.2437, 37.7749, -122.4194)

        assert d1 == pytest.approx(d2, rel=0.001)


class TestCoordinates:
    """Tests for Coordinates."""

    def test_valid(self):
        assert Coordinates(latitude=52.2, longitude=21.0).is_valid is True

    @pytest.mark.parametrize("lat,lon", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_out_of_range(self, lat, lon):
        assert Coordinates(latitude=lat, longitude=lon).is_valid is False


class TestDistanceFrom:
    """Tests for distance_from()."""

    def test_oakland_center(self, sample_record):
        """Oakland is about 13 km from the SF epicenter."""
        oakland = Coordinates(latitude=37.8044, longitude=-122.2712)
        assert distance_from(sample_record, oakland) == pytest.approx(13.4, abs=1.5)

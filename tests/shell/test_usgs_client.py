"""Tests for the USGS client.

Uses mocked requests.get to avoid network calls in tests.
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
import requests

from quake_locator.shell.usgs_client import EarthquakeQuery, USGSClient


TEST_QUERY = EarthquakeQuery(
    start_date=date(2024, 1, 1),
    end_date=date(2024, 3, 31),
    min_magnitude=2.5,
    latitude=52.2297,
    longitude=21.0122,
    max_radius_km=300.0,
)

SAMPLE_RESPONSE = {
    "type": "FeatureCollection",
    "features": [
        {
            "properties": {"mag": 3.1, "place": "Poland", "time": 1704067200000},
            "geometry": {"coordinates": [20.0, 50.0, 5.0]},
        },
    ],
}


def mock_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestBuildParams:
    """Tests for USGSClient._build_params()."""

    def test_radius_search_params(self):
        """All radius search parameters are sent, dates in ISO form."""
        params = USGSClient()._build_params(TEST_QUERY)

        assert params == {
            "format": "geojson",
            "starttime": "2024-01-01",
            "endtime": "2024-03-31T23:59:59",
            "minmagnitude": "2.5",
            "latitude": "52.2297",
            "longitude": "21.0122",
            "maxradiuskm": "300.0",
        }


class TestFetchEarthquakes:
    """Tests for USGSClient.fetch_earthquakes()."""

    @patch("quake_locator.shell.usgs_client.requests.get")
    def test_returns_decoded_json(self, mock_get):
        """Returns the raw GeoJSON body."""
        mock_get.return_value = mock_response(SAMPLE_RESPONSE)

        result = USGSClient().fetch_earthquakes(TEST_QUERY)

        assert result == SAMPLE_RESPONSE

    @patch("quake_locator.shell.usgs_client.requests.get")
    def test_uses_base_url_and_timeout(self, mock_get):
        """Request goes to the configured endpoint with the timeout."""
        mock_get.return_value = mock_response(SAMPLE_RESPONSE)

        client = USGSClient(base_url="https://usgs.example.com/query", timeout=5)
        client.fetch_earthquakes(TEST_QUERY)

        args, kwargs = mock_get.call_args
        assert args[0] == "https://usgs.example.com/query"
        assert kwargs["timeout"] == 5
        assert kwargs["params"]["maxradiuskm"] == "300.0"

    @patch("quake_locator.shell.usgs_client.requests.get")
    def test_http_error_propagates(self, mock_get):
        """HTTP errors are raised to the caller."""
        response = mock_response({})
        response.raise_for_status.side_effect = requests.HTTPError("400 Bad Request")
        mock_get.return_value = response

        with pytest.raises(requests.HTTPError):
            USGSClient().fetch_earthquakes(TEST_QUERY)

    @patch("quake_locator.shell.usgs_client.requests.get")
    def test_connection_error_propagates(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(requests.ConnectionError):
            USGSClient().fetch_earthquakes(TEST_QUERY)


class TestFetchLatest:
    """Tests for USGSClient.fetch_latest()."""

    @patch("quake_locator.shell.usgs_client.requests.get")
    def test_orders_by_time_limit_one(self, mock_get):
        """Asks for the single newest event."""
        mock_get.return_value = mock_response(SAMPLE_RESPONSE)

        result = USGSClient().fetch_latest()

        assert result == SAMPLE_RESPONSE
        assert mock_get.call_args[1]["params"] == {
            "format": "geojson",
            "orderby": "time",
            "limit": "1",
        }

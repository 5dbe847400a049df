"""Tests for the command line interface.

Configuration, orchestrator and browser are patched.
"""

from unittest.mock import Mock, patch

import pytest

from quake_locator.cli import build_parser, main
from quake_locator.core.config import Config
from quake_locator.core.earthquake import EarthquakeRecord
from quake_locator.core.geo import Coordinates
from quake_locator.core.state import SearchState
from quake_locator.core.validation import ValidationError


RECORD = EarthquakeRecord(
    magnitude=4.5,
    place="12 km S of Kielce, Poland",
    occurred_at_epoch_millis=1700000000000,
    longitude=20.6,
    latitude=50.8,
)

READY = SearchState.ready(
    [RECORD],
    "https://geojson.io/#data=data:application/json,abc",
    center=Coordinates(latitude=52.2297, longitude=21.0122),
)

SEARCH_ARGS = [
    "search", "Warsaw",
    "--start", "01-01-2024",
    "--end", "31-03-2024",
    "--min-magnitude", "2.5",
    "--radius", "300",
]


@pytest.fixture
def mock_orchestrator():
    orchestrator = Mock()
    orchestrator.config = Config()
    orchestrator.validate.return_value = None
    orchestrator.validate_quick.return_value = None
    orchestrator.search.return_value = READY
    orchestrator.quick_search.return_value = READY

    with patch("quake_locator.cli.load_config", return_value=Config()), \
            patch("quake_locator.cli.Orchestrator", return_value=orchestrator):
        yield orchestrator


@pytest.fixture
def mock_browser():
    with patch("quake_locator.cli.webbrowser.open") as mock_open:
        yield mock_open


class TestParser:
    """Tests for build_parser()."""

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_search_requires_dates(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["search", "Warsaw"])


class TestSearchCommand:
    """Tests for the search command."""

    def test_opens_map(self, mock_orchestrator, mock_browser, capsys):
        assert main(SEARCH_ARGS) == 0

        mock_browser.assert_called_once_with(READY.map_url)
        assert "Found 1 earthquakes" in capsys.readouterr().out

    def test_no_browser_prints_link(self, mock_orchestrator, mock_browser, capsys):
        assert main(["--no-browser", *SEARCH_ARGS]) == 0

        mock_browser.assert_not_called()
        assert READY.map_url in capsys.readouterr().out

    def test_invalid_form_exit_2(self, mock_orchestrator, mock_browser, capsys):
        mock_orchestrator.validate.return_value = SearchState.invalid([
            ValidationError(field="start_date", message="Invalid date, expected DD-MM-YYYY"),
        ])

        assert main(SEARCH_ARGS) == 2

        mock_orchestrator.search.assert_not_called()
        mock_browser.assert_not_called()
        assert "start_date: Invalid date" in capsys.readouterr().err

    def test_not_found_exit_1(self, mock_orchestrator, mock_browser, capsys):
        mock_orchestrator.search.return_value = SearchState.not_found()

        assert main(SEARCH_ARGS) == 1
        assert "Location not found" in capsys.readouterr().err

    def test_empty_exit_0(self, mock_orchestrator, mock_browser, capsys):
        mock_orchestrator.search.return_value = SearchState.empty()

        assert main(SEARCH_ARGS) == 0
        mock_browser.assert_not_called()
        assert "No earthquakes match" in capsys.readouterr().out


class TestQuickCommand:
    """Tests for the quick command."""

    def test_lists_results_with_distance(self, mock_orchestrator, mock_browser, capsys):
        assert main(["quick", "Warsaw"]) == 0

        out = capsys.readouterr().out
        assert "M4.5 - 12 km S of Kielce, Poland - 22:13 14-11-2023" in out
        assert "km away" in out
        mock_browser.assert_not_called()

    def test_open_single_result(self, mock_orchestrator, mock_browser):
        assert main(["quick", "Warsaw", "--open", "1"]) == 0

        url = mock_browser.call_args[0][0]
        assert url.startswith(Config().map_viewer_url)

    def test_open_out_of_range(self, mock_orchestrator, mock_browser, capsys):
        assert main(["quick", "Warsaw", "--open", "5"]) == 2
        mock_browser.assert_not_called()

    def test_map_opens_all(self, mock_orchestrator, mock_browser):
        assert main(["quick", "Warsaw", "--map"]) == 0
        mock_browser.assert_called_once_with(READY.map_url)


class TestLatestCommand:
    """Tests for the latest command."""

    def test_prints_summary(self, mock_orchestrator, capsys):
        mock_orchestrator.latest_summary.return_value = "Latest quake: M5.0"

        assert main(["latest"]) == 0
        assert "Latest quake: M5.0" in capsys.readouterr().out


class TestConfigError:
    """Configuration errors end with exit code 1."""

    def test_bad_config(self, capsys):
        with patch("quake_locator.cli.load_config", side_effect=ValueError("Invalid configuration")):
            assert main(["latest"]) == 1

        assert "Invalid configuration" in capsys.readouterr().err

"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates one user action at a time: validate the form,
geocode the location, query USGS and build the map link. Each action
returns a SearchState value; nothing here touches presentation state.
"""

import logging
from datetime import date, tzinfo, timezone

from quake_locator.core.config import Config
from quake_locator.core.earthquake import format_latest_summary, parse_records
from quake_locator.core.links import build_map_link
from quake_locator.core.search import (
    SearchCriteria,
    SearchForm,
    quick_search_criteria,
    to_criteria,
)
from quake_locator.core.state import SearchState, Status
from quake_locator.core.validation import (
    MSG_LOCATION_REQUIRED,
    ValidationError,
    validate_search_form,
)
from quake_locator.shell.geocoding_client import GeocodingClient
from quake_locator.shell.usgs_client import EarthquakeQuery, USGSClient


logger = logging.getLogger(__name__)


MSG_LATEST_FAILED = "Failed to fetch latest earthquake"
MSG_LATEST_NONE = "No recent earthquakes"


class Orchestrator:
    """Coordinates earthquake searches.

    This class wires together:
    - Geocoding client (place name -> coordinates)
    - USGS client (fetches earthquake data)
    - Core functions (validation, parsing, link building)
    """

    def __init__(
        self,
        config: Config | None = None,
        usgs_client: USGSClient | None = None,
        geocoder: GeocodingClient | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration (defaults if not provided)
            usgs_client: USGS client (created if not provided)
            geocoder: Geocoding client (created if not provided)
        """
        self.config = config or Config()
        self.usgs_client = usgs_client or USGSClient(
            base_url=self.config.usgs_api_url,
            timeout=self.config.request_timeout_seconds,
        )
        self.geocoder = geocoder or GeocodingClient(
            base_url=self.config.geocoder_url,
            user_agent=self.config.user_agent,
            timeout=self.config.request_timeout_seconds,
        )

    def validate(self, form: SearchForm) -> SearchState | None:
        """Validate the form synchronously.

        Returns:
            An invalid state with field errors, or None if the form is valid
        """
        result = validate_search_form(form, max_magnitude=self.config.max_magnitude)
        if result.valid:
            return None

        logger.debug("Form rejected: %s", result.by_field)
        return SearchState.invalid(result.errors)

    def search_form(self, form: SearchForm) -> SearchState:
        """Validate a form and, if valid, run the search."""
        invalid = self.validate(form)
        if invalid is not None:
            return invalid
        return self.search(to_criteria(form))

    def search(self, criteria: SearchCriteria) -> SearchState:
        """Run a search and return the final state.

        This method performs I/O (geocoding and USGS query).

        Args:
            criteria: Validated search parameters

        Returns:
            not_found, empty, failed, or ready with the map link
        """
        try:
            center = self.geocoder.geocode(criteria.location)
            if center is None:
                return SearchState.not_found()

            geojson = self.usgs_client.fetch_earthquakes(EarthquakeQuery(
                start_date=criteria.start_date,
                end_date=criteria.end_date,
                min_magnitude=criteria.min_magnitude,
                latitude=center.latitude,
                longitude=center.longitude,
                max_radius_km=criteria.radius_km,
            ))

            # Pure core function
            records = parse_records(geojson)
        except Exception as e:
            logger.error("Search for %r failed: %s", criteria.location, e)
            return SearchState.failed(e)

        if not records:
            logger.info("No earthquakes found near %r", criteria.location)
            return SearchState.empty()

        logger.info(
            "Found %d earthquakes near %r",
            len(records),
            criteria.location,
        )
        return SearchState.ready(
            records,
            build_map_link(records, base_url=self.config.map_viewer_url),
            center=center,
        )

    def validate_quick(self, location: str) -> SearchState | None:
        """Quick search only needs a location."""
        if not location or not location.strip():
            return SearchState.invalid([
                ValidationError(field="location", message=MSG_LOCATION_REQUIRED),
            ])
        return None

    def quick_search(self, location: str, today: date | None = None) -> SearchState:
        """Search the last months around a place with fixed parameters.

        Unlike search(), an empty result is still ready: the caller shows
        the (empty) list rather than a dialog.

        Args:
            location: Place to search around
            today: Last day of the range (defaults to today)

        Returns:
            State carrying the records found
        """
        invalid = self.validate_quick(location)
        if invalid is not None:
            return invalid

        if today is None:
            today = date.today()

        criteria = quick_search_criteria(location, today, self.config.quick_search)
        state = self.search(criteria)

        if state.status == Status.EMPTY:
            return SearchState.ready([], build_map_link([], base_url=self.config.map_viewer_url))
        return state

    def latest_summary(self, tz: tzinfo = timezone.utc) -> str:
        """Describe the most recent earthquake worldwide.

        Reverse geocoding failures fall back to an unknown region; any
        other failure yields a fixed error line.
        """
        try:
            records = parse_records(self.usgs_client.fetch_latest())
        except Exception as e:
            logger.error("Failed to fetch latest earthquake: %s", e)
            return MSG_LATEST_FAILED

        if not records:
            return MSG_LATEST_NONE

        latest = records[0]
        try:
            country = self.geocoder.reverse_country(latest.latitude, latest.longitude)
        except Exception as e:
            logger.warning("Reverse geocoding failed: %s", e)
            country = None

        try:
            return format_latest_summary(latest, country, tz)
        except Exception as e:
            logger.error("Failed to describe latest earthquake: %s", e)
            return MSG_LATEST_FAILED

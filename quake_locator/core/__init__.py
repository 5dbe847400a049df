"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Form validation (dates, numbers, date ranges)
- Earthquake record parsing and display formatting
- Map link generation
- Search criteria and presentation state

All functions here are deterministic and have no I/O.
"""

from quake_locator.core.earthquake import EarthquakeRecord, parse_records
from quake_locator.core.geo import Coordinates, calculate_distance
from quake_locator.core.links import build_map_link
from quake_locator.core.search import SearchCriteria, SearchForm
from quake_locator.core.state import SearchState, Status
from quake_locator.core.validation import (
    ValidationResult,
    is_start_before_or_equal_end,
    validate_date,
    validate_number,
    validate_search_form,
)

__all__ = [
    # Earthquake
    "EarthquakeRecord",
    "parse_records",
    # Geo
    "Coordinates",
    "calculate_distance",
    # Links
    "build_map_link",
    # Search
    "SearchCriteria",
    "SearchForm",
    # State
    "SearchState",
    "Status",
    # Validation
    "ValidationResult",
    "is_start_before_or_equal_end",
    "validate_date",
    "validate_number",
    "validate_search_form",
]

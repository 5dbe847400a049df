"""Search criteria - Pure data structures and conversions.

A SearchForm holds what the user typed. Once it validates, it is
converted to typed SearchCriteria that the shell can send to USGS.
"""

import calendar
from dataclasses import dataclass
from datetime import date

from quake_locator.core.validation import parse_date, parse_number


@dataclass(frozen=True)
class SearchForm:
    """Raw text input from the search form."""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    min_magnitude: str = ""
    radius_km: str = ""


@dataclass(frozen=True)
class SearchCriteria:
    """Validated search parameters.

    Attributes:
        location: Free-text place to geocode
        start_date: First day of the range (inclusive)
        end_date: Last day of the range (inclusive)
        min_magnitude: Minimum magnitude, >= 0
        radius_km: Search radius around the location, >= 0
    """
    location: str
    start_date: date
    end_date: date
    min_magnitude: float
    radius_km: float


@dataclass(frozen=True)
class QuickSearchDefaults:
    """Fixed parameters used by quick search.

    Attributes:
        min_magnitude: Minimum magnitude
        radius_km: Search radius
        lookback_months: How many months back from today
    """
    min_magnitude: float = 1.0
    radius_km: float = 500.0
    lookback_months: int = 6


def to_criteria(form: SearchForm) -> SearchCriteria:
    """Convert a validated form into criteria.

    Pure function. Call only after validate_search_form() passed.

    Raises:
        ValueError: If a field does not parse
    """
    start = parse_date(form.start_date)
    end = parse_date(form.end_date)
    magnitude = parse_number(form.min_magnitude)
    radius = parse_number(form.radius_km)

    if start is None or end is None or magnitude is None or radius is None:
        raise ValueError("Search form has not been validated")

    return SearchCriteria(
        location=form.location.strip(),
        start_date=start,
        end_date=end,
        min_magnitude=magnitude,
        radius_km=radius,
    )


def subtract_months(value: date, months: int) -> date:
    """Go back a number of calendar months, clamping the day.

    31 August minus 6 months is 28 (or 29) February.
    """
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def quick_search_criteria(
    location: str,
    today: date,
    defaults: QuickSearchDefaults = QuickSearchDefaults(),
) -> SearchCriteria:
    """Build criteria for a quick search ending today.

    Pure function.

    Args:
        location: Place to search around
        today: Last day of the range
        defaults: Magnitude, radius and lookback to use

    Returns:
        SearchCriteria covering the last lookback_months months
    """
    return SearchCriteria(
        location=location.strip(),
        start_date=subtract_months(today, defaults.lookback_months),
        end_date=today,
        min_magnitude=defaults.min_magnitude,
        radius_km=defaults.radius_km,
    )

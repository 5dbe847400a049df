"""Earthquake records and parsing - Pure functions.

This module turns the USGS GeoJSON response into typed records.
Parsing is plain field access; the catalog format is not validated
beyond that. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any


# Display format for event times, e.g. "14:05 19-12-2023"
TIME_FORMAT = "%H:%M %d-%m-%Y"

UNKNOWN_REGION = "unknown region"
UNKNOWN_LOCATION = "Unknown location"


@dataclass(frozen=True)
class EarthquakeRecord:
    """Immutable earthquake as returned by the catalog.

    Attributes:
        magnitude: Event magnitude
        place: Human-readable location description
        occurred_at_epoch_millis: Event time, milliseconds since epoch (UTC)
        longitude: Epicenter longitude
        latitude: Epicenter latitude
    """
    magnitude: float
    place: str
    occurred_at_epoch_millis: int
    longitude: float
    latitude: float

    @property
    def occurred_at(self) -> datetime:
        """Event time as an aware UTC datetime."""
        return datetime.fromtimestamp(
            self.occurred_at_epoch_millis / 1000, tz=timezone.utc
        )


def parse_record(feature: dict[str, Any]) -> EarthquakeRecord:
    """Read one GeoJSON feature into an EarthquakeRecord.

    Pure function. Only the first two coordinate components
    (longitude, latitude) are kept; depth is dropped. A null place becomes
    "Unknown location".

    Raises:
        KeyError, IndexError, TypeError, ValueError: if a field is missing
            or has the wrong type
    """
    props = feature["properties"]
    coords = feature["geometry"]["coordinates"]

    return EarthquakeRecord(
        magnitude=float(props["mag"]),
        place=props["place"] or UNKNOWN_LOCATION,
        occurred_at_epoch_millis=int(props["time"]),
        longitude=float(coords[0]),
        latitude=float(coords[1]),
    )


def parse_records(geojson: dict[str, Any]) -> list[EarthquakeRecord]:
    """Read every feature of a response, keeping the catalog's order."""
    return [parse_record(feature) for feature in geojson.get("features", [])]


def format_time(record: EarthquakeRecord, tz: tzinfo = timezone.utc) -> str:
    """Format the event time as HH:MM DD-MM-YYYY in the given zone."""
    return record.occurred_at.astimezone(tz).strftime(TIME_FORMAT)


def clean_place(place: str | None) -> str:
    """Drop the trailing ", region" part of a USGS place string.

    "5 km SW of Town, Country" becomes "5 km SW of Town".
    """
    if not place:
        return UNKNOWN_LOCATION
    head, sep, _ = place.rpartition(",")
    if not sep:
        return place.strip()
    return head.strip()


def format_record_line(record: EarthquakeRecord, tz: tzinfo = timezone.utc) -> str:
    """One-line listing used by quick search results."""
    return f"M{record.magnitude:.1f} - {record.place} - {format_time(record, tz)}"


def format_latest_summary(
    record: EarthquakeRecord,
    country: str | None,
    tz: tzinfo = timezone.utc,
) -> str:
    """Describe the most recent earthquake in one line.

    Pure function.

    Args:
        record: The latest earthquake
        country: Reverse-geocoded country, None if unknown
        tz: Zone for the displayed time

    Returns:
        e.g. "Latest quake: M4.5 - 10 km N of Town, Chile - 14:05 19-12-2023"
    """
    return (
        f"Latest quake: M{record.magnitude:.1f} - "
        f"{clean_place(record.place)}, {country or UNKNOWN_REGION} - "
        f"{format_time(record, tz)}"
    )

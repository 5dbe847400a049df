"""Map link generation - Pure functions.

Builds a geojson.io link that carries the earthquakes as an inline
GeoJSON FeatureCollection. No size limit is applied; very large result
sets can exceed what a browser accepts in a URL.
"""

import json
from typing import Any, Iterable
from urllib.parse import quote

from quake_locator.core.earthquake import EarthquakeRecord


GEOJSON_IO_URL = "https://geojson.io/#data=data:application/json,"


def to_feature(record: EarthquakeRecord) -> dict[str, Any]:
    """Convert a record into a GeoJSON Point feature (lon, lat order)."""
    return {
        "type": "Feature",
        "properties": {
            "mag": record.magnitude,
            "place": record.place,
            "time": record.occurred_at_epoch_millis,
        },
        "geometry": {
            "type": "Point",
            "coordinates": [record.longitude, record.latitude],
        },
    }


def to_feature_collection(records: Iterable[EarthquakeRecord]) -> dict[str, Any]:
    """Wrap records in a FeatureCollection, preserving their order."""
    return {
        "type": "FeatureCollection",
        "features": [to_feature(r) for r in records],
    }


def build_map_link(
    records: Iterable[EarthquakeRecord],
    base_url: str = GEOJSON_IO_URL,
) -> str:
    """Build a shareable visualization URL for the records.

    Pure function. The collection is serialized as compact JSON and
    percent-encoded as a URI component, so the output is deterministic
    for a given input.

    Args:
        records: Earthquakes to show; an empty list gives an empty collection
        base_url: Viewer prefix the encoded payload is appended to

    Returns:
        Full URL text
    """
    payload = json.dumps(
        to_feature_collection(records),
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return base_url + quote(payload, safe="")

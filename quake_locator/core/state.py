"""Presentation state - Pure data structures.

Every action ends in one SearchState value. Background work returns
these values instead of mutating UI state, and the presentation layer
applies them as they arrive.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from quake_locator.core.earthquake import EarthquakeRecord
from quake_locator.core.geo import Coordinates, distance_from
from quake_locator.core.validation import ValidationError


MSG_NOT_FOUND = "Location not found"
MSG_NO_RESULTS = "No earthquakes match the given criteria"
MSG_NETWORK_ERROR = "Network error: {error}"


class Status(str, Enum):
    """Lifecycle of a single search action."""
    IDLE = "idle"
    LOADING = "loading"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    FAILED = "failed"
    READY = "ready"


@dataclass(frozen=True)
class SearchState:
    """Immutable snapshot of what the presentation layer should show.

    Attributes:
        status: Where the action ended up
        message: Dialog text for not_found, empty and failed
        field_errors: Inline errors for invalid forms
        map_url: Link to open when ready
        earthquakes: Records found, in catalog order
        center: Geocoded search center
    """
    status: Status = Status.IDLE
    message: str | None = None
    field_errors: tuple[ValidationError, ...] = ()
    map_url: str | None = None
    earthquakes: tuple[EarthquakeRecord, ...] = field(default_factory=tuple)
    center: Coordinates | None = None

    @property
    def is_loading(self) -> bool:
        return self.status == Status.LOADING

    @property
    def is_error(self) -> bool:
        """True for states that end the action with a problem."""
        return self.status in (Status.INVALID, Status.NOT_FOUND, Status.FAILED)

    @classmethod
    def loading(cls) -> "SearchState":
        return cls(status=Status.LOADING)

    @classmethod
    def invalid(cls, errors: list[ValidationError]) -> "SearchState":
        return cls(status=Status.INVALID, field_errors=tuple(errors))

    @classmethod
    def not_found(cls) -> "SearchState":
        return cls(status=Status.NOT_FOUND, message=MSG_NOT_FOUND)

    @classmethod
    def empty(cls) -> "SearchState":
        return cls(status=Status.EMPTY, message=MSG_NO_RESULTS)

    @classmethod
    def failed(cls, error: Exception | str) -> "SearchState":
        return cls(status=Status.FAILED, message=MSG_NETWORK_ERROR.format(error=error))

    @classmethod
    def ready(
        cls,
        earthquakes: list[EarthquakeRecord],
        map_url: str,
        center: Coordinates | None = None,
    ) -> "SearchState":
        return cls(
            status=Status.READY,
            map_url=map_url,
            earthquakes=tuple(earthquakes),
            center=center,
        )


def state_to_dict(state: SearchState) -> dict[str, Any]:
    """Serialize a state for JSON responses.

    Pure function.
    """
    center = state.center
    return {
        "status": state.status.value,
        "message": state.message,
        "field_errors": {e.field: e.message for e in state.field_errors},
        "map_url": state.map_url,
        "center": (
            {"latitude": center.latitude, "longitude": center.longitude}
            if center is not None else None
        ),
        "count": len(state.earthquakes),
        "earthquakes": [
            {
                "mag": e.magnitude,
                "place": e.place,
                "time": e.occurred_at_epoch_millis,
                "longitude": e.longitude,
                "latitude": e.latitude,
                "distance_km": (
                    round(distance_from(e, center), 1) if center is not None else None
                ),
            }
            for e in state.earthquakes
        ],
    }

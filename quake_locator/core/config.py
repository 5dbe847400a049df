"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from quake_locator.core.links import GEOJSON_IO_URL
from quake_locator.core.search import QuickSearchDefaults
from quake_locator.core.validation import ValidationError


# USGS FDSN Event Web Service query endpoint
USGS_API_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"

# Nominatim (OpenStreetMap) geocoder
NOMINATIM_URL = "https://nominatim.openstreetmap.org"

DEFAULT_USER_AGENT = "quake-locator/0.1"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        usgs_api_url: Earthquake catalog query endpoint
        geocoder_url: Base URL of the Nominatim service
        user_agent: User-Agent sent to the geocoder (required by its policy)
        request_timeout_seconds: Per-request HTTP timeout
        map_viewer_url: Prefix of generated map links
        max_magnitude: Upper bound accepted for the minimum magnitude field
        quick_search: Parameters used by quick search
    """
    usgs_api_url: str = USGS_API_URL
    geocoder_url: str = NOMINATIM_URL
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout_seconds: int = 30
    map_viewer_url: str = GEOJSON_IO_URL
    max_magnitude: float = 10.0
    quick_search: QuickSearchDefaults = field(default_factory=QuickSearchDefaults)


@dataclass
class ConfigValidation:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ConfigValidation:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ConfigValidation with any errors/warnings found
    """
    errors: list[ValidationError] = []

    for name in ("usgs_api_url", "geocoder_url", "map_viewer_url"):
        if not getattr(config, name).strip():
            errors.append(ValidationError(field=name, message="URL must not be empty"))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message=f"Timeout must be positive, got {config.request_timeout_seconds}",
        ))

    if config.max_magnitude <= 0:
        errors.append(ValidationError(
            field="max_magnitude",
            message=f"Maximum magnitude must be positive, got {config.max_magnitude}",
        ))

    quick = config.quick_search
    if quick.min_magnitude < 0:
        errors.append(ValidationError(
            field="quick_search.min_magnitude",
            message=f"Magnitude must be 0 or greater, got {quick.min_magnitude}",
        ))
    elif quick.min_magnitude > config.max_magnitude:
        errors.append(ValidationError(
            field="quick_search.min_magnitude",
            message=(
                f"min_magnitude ({quick.min_magnitude}) > "
                f"max_magnitude ({config.max_magnitude})"
            ),
        ))

    if quick.radius_km < 0:
        errors.append(ValidationError(
            field="quick_search.radius_km",
            message=f"Radius must be 0 or greater, got {quick.radius_km}",
        ))

    if quick.lookback_months <= 0:
        errors.append(ValidationError(
            field="quick_search.lookback_months",
            message=f"Lookback must be at least one month, got {quick.lookback_months}",
        ))

    # Nominatim blocks generic agents
    if not config.user_agent.strip() or config.user_agent.startswith("${"):
        errors.append(ValidationError(
            field="user_agent",
            message="User agent not set; the geocoder may reject requests",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ConfigValidation(
        valid=not has_critical,
        errors=errors,
    )

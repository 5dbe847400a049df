"""Input validation - Pure functions.

This module validates the free-text fields of the search form:
dates in DD-MM-YYYY, non-negative numbers, and the date range.
All functions are pure with no side effects.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quake_locator.core.search import SearchForm


# Day-month-year, four digit year
DATE_FORMAT = "%d-%m-%Y"

MSG_DATE_REQUIRED = "Date is required"
MSG_DATE_FORMAT = "Invalid date, expected DD-MM-YYYY"
MSG_LOCATION_REQUIRED = "Location is required"
MSG_DATE_RANGE = "Start date must be on or before end date"

# Plain decimal with optional exponent, e.g. "4", "-2.5", ".5", "1e3"
NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single field.

    Attributes:
        valid: True if the value passed
        message: Human-readable reason when invalid
    """
    valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)


@dataclass(frozen=True)
class ValidationError:
    """A validation error attached to a named field.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class FormValidation:
    """Result of validating the whole search form.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of field errors
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def by_field(self) -> dict[str, str]:
        """Map each field to its first error message."""
        messages: dict[str, str] = {}
        for error in self.errors:
            messages.setdefault(error.field, error.message)
        return messages


def parse_date(text: str) -> date | None:
    """Parse DD-MM-YYYY text strictly.

    Pure function. Out-of-range days and months are rejected rather than
    rolled over, so "31-04-2024" returns None.

    Args:
        text: Date text

    Returns:
        Parsed date, or None if the text is not a real calendar date
    """
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except (TypeError, ValueError, AttributeError):
        return None


def format_date(value: date) -> str:
    """Format a date as DD-MM-YYYY."""
    return value.strftime(DATE_FORMAT)


def validate_date(text: str) -> ValidationResult:
    """Validate a DD-MM-YYYY date field.

    Pure function.

    Args:
        text: Raw field text

    Returns:
        ValidationResult; blank text reports "required", anything
        unparsable reports "bad format"
    """
    if not text or not text.strip():
        return ValidationResult.invalid(MSG_DATE_REQUIRED)

    if parse_date(text) is None:
        return ValidationResult.invalid(MSG_DATE_FORMAT)

    return ValidationResult.ok()


def parse_number(text: str) -> float | None:
    """Parse a real, finite number. Returns None otherwise."""
    if not isinstance(text, str):
        return None

    text = text.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def validate_number(
    text: str,
    field_label: str,
    maximum: float | None = None,
) -> ValidationResult:
    """Validate a non-negative numeric field.

    Pure function. Zero is accepted; the rule is ">= 0" everywhere.

    Args:
        text: Raw field text
        field_label: Label embedded in the error message
        maximum: Optional inclusive upper bound

    Returns:
        ValidationResult
    """
    if not text or not text.strip():
        return ValidationResult.invalid(f"{field_label} is required")

    value = parse_number(text)
    if value is None:
        return ValidationResult.invalid(f"{field_label} must be a number")

    if value < 0:
        return ValidationResult.invalid(f"{field_label} must be 0 or greater")

    if maximum is not None and value > maximum:
        return ValidationResult.invalid(
            f"{field_label} must be at most {maximum:g}"
        )

    return ValidationResult.ok()


def is_start_before_or_equal_end(start_text: str, end_text: str) -> bool:
    """Check that the start date does not come after the end date.

    Pure function. Fails closed: returns False if either side does not
    parse. The same calendar day counts as a valid range.
    """
    start = parse_date(start_text)
    end = parse_date(end_text)

    if start is None or end is None:
        return False

    return start <= end


def validate_search_form(
    form: "SearchForm",
    max_magnitude: float | None = None,
) -> FormValidation:
    """Validate every field of the search form.

    Pure function. The date range is only checked once each field is
    valid on its own, and then reported against both date fields.

    Args:
        form: Raw form input
        max_magnitude: Upper bound for the minimum magnitude field

    Returns:
        FormValidation with one entry per failing field
    """
    errors: list[ValidationError] = []

    if not form.location or not form.location.strip():
        errors.append(ValidationError(field="location", message=MSG_LOCATION_REQUIRED))

    checks = [
        ("start_date", validate_date(form.start_date)),
        ("end_date", validate_date(form.end_date)),
        ("min_magnitude", validate_number(form.min_magnitude, "Magnitude", maximum=max_magnitude)),
        ("radius_km", validate_number(form.radius_km, "Radius")),
    ]
    for field_name, result in checks:
        if not result.valid:
            errors.append(ValidationError(field=field_name, message=result.message or ""))

    if not errors and not is_start_before_or_equal_end(form.start_date, form.end_date):
        errors.append(ValidationError(field="start_date", message=MSG_DATE_RANGE))
        errors.append(ValidationError(field="end_date", message=MSG_DATE_RANGE))

    return FormValidation(valid=not errors, errors=errors)

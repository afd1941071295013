"""
Input Validation Utilities

This module validates the loosely typed birth details that arrive from
form collection before they reach the chart engine. Every failure is an
InputError; nothing is silently defaulted.
"""

import math
import re
from datetime import date, time
from typing import Any

from vedic_kundali.domain.kundali.errors import InputError
from vedic_kundali.domain.kundali.time_conversion import MAX_UTC_OFFSET


DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# HH:MM or HH:MM:SS, optionally followed by Z or an inline ±HH:MM offset
TIME_PATTERN = re.compile(r"^\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?(Z|[+-]\d{2}:?\d{2})?$")


def sanitize_string(value: str, max_length: int = 500) -> str:
    """
    Sanitize a string by removing control characters and escapes.
    """
    if not isinstance(value, str):
        return str(value)

    # Truncate to max length
    value = value[:max_length]

    # Remove null bytes
    value = value.replace("\x00", "")

    # Remove backslash escapes that could interfere
    value = re.sub(r"\\[\'\"nrtbf0]", "", value)

    return value.strip()


def validate_name(name: str) -> str:
    """
    Validate and sanitize a name field.

    Names should contain only letters, spaces, and basic punctuation.
    """
    if not name or not isinstance(name, str):
        raise InputError("Invalid name provided")

    name = sanitize_string(name, max_length=100)

    # Only allow letters, spaces, hyphens, apostrophes, and periods
    if not re.match(r"^[\w\s\.\'\-]+$", name, re.UNICODE):
        raise InputError("Name contains invalid characters")

    return name


def validate_date_format(date_str: Any) -> date:
    """Validate ISO date format (YYYY-MM-DD) and parse it."""
    if isinstance(date_str, date):
        return date_str
    if not isinstance(date_str, str) or not DATE_PATTERN.match(date_str):
        raise InputError("Invalid date format. Use YYYY-MM-DD")
    try:
        return date.fromisoformat(date_str)
    except ValueError as e:
        raise InputError(f"Invalid date {date_str!r}: {e}") from e


def validate_time_format(time_str: Any) -> time:
    """
    Validate time format (HH:MM or HH:MM:SS, optional offset) and parse it.

    An inline offset such as "+05:30" is kept on the returned time.
    """
    if isinstance(time_str, time):
        return time_str
    if not isinstance(time_str, str) or not TIME_PATTERN.match(time_str):
        raise InputError("Invalid time format. Use HH:MM, HH:MM:SS or HH:MM+05:30")

    text = time_str[:-1] + "+00:00" if time_str.endswith("Z") else time_str
    try:
        parsed = time.fromisoformat(text)
    except ValueError as e:
        raise InputError(f"Invalid time {time_str!r}: {e}") from e

    offset = parsed.utcoffset()
    if offset is not None and abs(offset) > MAX_UTC_OFFSET:
        raise InputError(f"UTC offset out of range in time {time_str!r}")
    return parsed


def _coordinate(value: Any, label: str, limit: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputError(f"{label} must be a number")
    if not math.isfinite(value) or value < -limit or value > limit:
        raise InputError(f"{label} must be between -{limit:g} and {limit:g}")
    return float(value)


def validate_latitude(lat: float) -> float:
    """Validate latitude range."""
    return _coordinate(lat, "Latitude", 90.0)


def validate_longitude(lon: float) -> float:
    """Validate longitude range."""
    return _coordinate(lon, "Longitude", 180.0)

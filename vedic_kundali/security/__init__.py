"""
Security Module

This package validates untrusted birth details for the chart engine.
"""

from vedic_kundali.security.validators import (
    validate_name,
    validate_date_format,
    validate_time_format,
    validate_latitude,
    validate_longitude,
    sanitize_string,
)

__all__ = [
    "validate_name",
    "validate_date_format",
    "validate_time_format",
    "validate_latitude",
    "validate_longitude",
    "sanitize_string",
]

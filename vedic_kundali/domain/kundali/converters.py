from typing import Any, Dict, Mapping

from vedic_kundali.config import settings
from vedic_kundali.domain.kundali.engine import BirthInput
from vedic_kundali.domain.kundali.errors import InputError
from vedic_kundali.domain.kundali.schemas import KundaliChart
from vedic_kundali.security.validators import (
    validate_date_format,
    validate_latitude,
    validate_longitude,
    validate_name,
    validate_time_format,
)


REQUIRED_FIELDS = ("birth_date", "birth_time", "latitude", "longitude")


# ─────────────────────────────────────────────
# Form payload → Domain
# ─────────────────────────────────────────────

def birth_input_from_payload(payload: Mapping[str, Any]) -> BirthInput:
    """
    Convert form-collected birth details into a validated BirthInput.

    Coordinates must already be resolved; missing fields are an error,
    never a default location.
    """
    missing = [field for field in REQUIRED_FIELDS if payload.get(field) is None]
    if missing:
        raise InputError(f"Missing birth details: {', '.join(missing)}")

    name = payload.get("name")

    return BirthInput(
        birth_date=validate_date_format(payload["birth_date"]),
        birth_time=validate_time_format(payload["birth_time"]),
        latitude=validate_latitude(payload["latitude"]),
        longitude=validate_longitude(payload["longitude"]),
        utc_offset=payload.get("utc_offset"),
        timezone=payload.get("timezone") or None,
        name=validate_name(name) if name else None,
        ayanamsa=payload.get("ayanamsa") or settings.DEFAULT_AYANAMSA,
    )


# ─────────────────────────────────────────────
# Domain → JSON
# ─────────────────────────────────────────────

def chart_to_dict(chart: KundaliChart) -> Dict[str, Any]:
    """
    Convert a KundaliChart into plain JSON types.
    """
    return chart.model_dump(mode="json")


def chart_to_json(chart: KundaliChart) -> str:
    return chart.model_dump_json()


# ─────────────────────────────────────────────
# JSON → Domain
# ─────────────────────────────────────────────

def chart_from_dict(data: Mapping[str, Any]) -> KundaliChart:
    """
    Restore a KundaliChart from a stored JSON blob.
    """
    return KundaliChart.model_validate(dict(data))


def chart_from_json(text: str) -> KundaliChart:
    return KundaliChart.model_validate_json(text)

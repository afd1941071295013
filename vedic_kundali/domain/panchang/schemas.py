from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from vedic_kundali.domain.kundali.derived.schemas import NakshatraInfo


# ─────────────────────────────────────────────
# Panchang Limbs
# ─────────────────────────────────────────────

class Tithi(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=30)
    name: str
    paksha: str


class PanchangYoga(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=27)
    name: str


class Karana(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=60)
    name: str


class Vara(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    weekday: str
    lord: str


# ─────────────────────────────────────────────
# Panchang
# ─────────────────────────────────────────────

class Panchang(BaseModel):
    """
    Vedic calendar attributes at the birth instant.
    """
    model_config = ConfigDict(frozen=True)

    tithi: Tithi
    yoga: PanchangYoga
    karana: Karana
    nakshatra: NakshatraInfo
    vara: Vara
    sunrise: Optional[datetime] = Field(
        default=None,
        description="Local sunrise on the civil birth date; null during polar day or night",
    )
    elongation: float
    calculation_version: str

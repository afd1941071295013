from datetime import datetime
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from vedic_kundali.domain.dasha.schemas import DashaTimeline
from vedic_kundali.domain.kundali.derived.schemas import NakshatraInfo, PlanetStrength
from vedic_kundali.domain.panchang.schemas import Panchang


# ─────────────────────────────────────────────
# Core Atomic Schemas
# ─────────────────────────────────────────────

class PlanetPosition(BaseModel):
    """
    Represents a single planet's position in a chart.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    longitude: float = Field(ge=0, lt=360, description="Sidereal longitude")
    sign: int = Field(ge=1, le=12)
    sign_name: str
    degree: float = Field(ge=0, lt=30, description="Degree within sign")
    house: int = Field(ge=1, le=12)
    retrograde: bool = False
    combust: bool = False
    speed: float = Field(description="Daily motion in degrees per day")
    nakshatra: NakshatraInfo
    strength: PlanetStrength


class Ascendant(BaseModel):
    """
    Represents the ascendant (Lagna).
    """
    model_config = ConfigDict(frozen=True)

    longitude: float = Field(ge=0, lt=360)
    sign: int = Field(ge=1, le=12)
    sign_name: str
    degree: float = Field(ge=0, lt=30)
    lord: str
    nakshatra: NakshatraInfo


class House(BaseModel):
    """
    Represents one whole-sign house.
    """
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=12)
    sign: int = Field(ge=1, le=12)
    sign_name: str
    lord: str
    planets: Tuple[str, ...] = ()
    category: str


class ChartMeta(BaseModel):
    """
    Provenance of a computed chart.
    """
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    ayanamsa: str
    ayanamsa_degrees: float
    birth_utc: datetime
    julian_day: float
    julian_century: float
    calculation_version: str
    warnings: Tuple[str, ...] = ()


# ─────────────────────────────────────────────
# Core Kundali Schema (D1)
# ─────────────────────────────────────────────

class KundaliChart(BaseModel):
    """
    Represents the core D1 (Rashi) kundali.
    """
    model_config = ConfigDict(frozen=True)

    meta: ChartMeta
    ascendant: Ascendant
    planets: Tuple[PlanetPosition, ...]
    houses: Tuple[House, ...]
    dasha: DashaTimeline
    panchang: Panchang

    def planet(self, name: str) -> PlanetPosition:
        for p in self.planets:
            if p.name == name:
                return p
        raise KeyError(name)

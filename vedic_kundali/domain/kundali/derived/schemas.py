from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


# ─────────────────────────────────────────────
# Atomic Derived Facts
# ─────────────────────────────────────────────

class NakshatraInfo(BaseModel):
    """
    Lunar mansion occupied by a longitude.
    """
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, le=26)
    name: str
    lord: str
    pada: int = Field(ge=1, le=4)


class PlanetStrength(BaseModel):
    """
    Deterministic strength evaluation of a planet.
    """
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    level: str
    rank: int = Field(ge=1, le=9)
    factors: Tuple[str, ...] = ()

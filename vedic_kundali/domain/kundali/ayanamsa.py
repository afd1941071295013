from dataclasses import dataclass
from typing import Dict

from vedic_kundali.domain.kundali.errors import UnsupportedAyanamsaError
from vedic_kundali.domain.kundali.zodiac import normalize


ARCSECONDS_PER_DEGREE = 3600.0


@dataclass(frozen=True)
class LinearAyanamsa:
    """
    Ayanamsa anchored at J2000.0 and advanced at a constant precession rate.
    """
    name: str
    value_at_j2000: float
    arcseconds_per_year: float

    def value(self, t: float) -> float:
        years = t * 100.0
        return self.value_at_j2000 + years * self.arcseconds_per_year / ARCSECONDS_PER_DEGREE

    def to_sidereal(self, tropical_longitude: float, t: float) -> float:
        return normalize(tropical_longitude - self.value(t))


LAHIRI = LinearAyanamsa(name="Lahiri", value_at_j2000=23.85, arcseconds_per_year=50.29)

AYANAMSAS: Dict[str, LinearAyanamsa] = {
    "lahiri": LAHIRI,
}


def get_ayanamsa(name: str) -> LinearAyanamsa:
    try:
        return AYANAMSAS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise UnsupportedAyanamsaError(
            f"Unsupported ayanamsa {name!r}; supported: {sorted(a.name for a in AYANAMSAS.values())}"
        ) from None

"""
Mean-element ephemeris for the nine grahas.

Each body's tropical ecliptic longitude is a linear polynomial in the
Julian century T. Sun and Moon additionally get a first-harmonic
equation of center (amplitude · sin(mean anomaly)). This is a first-order
approximation: no perturbation terms, nutation, light-time or parallax,
and no geocentric reduction of the planetary mean longitudes.
"""
import math
from dataclasses import dataclass
from typing import Dict, Optional

from vedic_kundali.domain.kundali.time_conversion import DAYS_PER_CENTURY
from vedic_kundali.domain.kundali.zodiac import PLANET_ORDER, angular_difference, normalize


@dataclass(frozen=True)
class MeanElement:
    """
    Longitude polynomial: epoch value at J2000.0 plus rate in degrees per Julian century.
    """
    epoch: float
    rate: float

    def at(self, t: float) -> float:
        return self.epoch + self.rate * t


@dataclass(frozen=True)
class EquationOfCenter:
    anomaly: MeanElement
    amplitude: float

    def at(self, t: float) -> float:
        m = math.radians(normalize(self.anomaly.at(t)))
        return self.amplitude * math.sin(m)


MEAN_LONGITUDES: Dict[str, MeanElement] = {
    "Sun": MeanElement(280.46646, 36000.76983),
    "Moon": MeanElement(218.3165, 481267.8813),
    "Mercury": MeanElement(252.2509, 149472.6746),
    "Venus": MeanElement(181.9798, 58517.8157),
    "Mars": MeanElement(355.433, 19140.2965),
    "Jupiter": MeanElement(34.3515, 3034.9057),
    "Saturn": MeanElement(50.0774, 1222.1138),
    # Mean ascending node regresses
    "Rahu": MeanElement(125.0445, -1934.1363),
}

EQUATIONS_OF_CENTER: Dict[str, EquationOfCenter] = {
    "Sun": EquationOfCenter(MeanElement(357.529, 35999.05), 1.915),
    "Moon": EquationOfCenter(MeanElement(134.963, 477198.867), 6.289),
}


def tropical_longitude(body: str, t: float) -> float:
    """
    Tropical longitude of a body at Julian century `t`, in [0, 360).
    """
    if body == "Ketu":
        return normalize(tropical_longitude("Rahu", t) + 180.0)

    longitude = MEAN_LONGITUDES[body].at(t)
    equation = EQUATIONS_OF_CENTER.get(body)
    if equation is not None:
        longitude += equation.at(t)

    return normalize(longitude)


def tropical_longitudes(t: float) -> Dict[str, float]:
    return {body: tropical_longitude(body, t) for body in PLANET_ORDER}


def daily_motion(body: str, t: float, sample_days: float = 1.0) -> float:
    """
    Forward-difference rate of change of longitude, in degrees per day.
    Negative means the body is moving backwards through the zodiac.
    """
    dt = sample_days / DAYS_PER_CENTURY
    delta = angular_difference(
        tropical_longitude(body, t + dt),
        tropical_longitude(body, t),
    )
    return delta / sample_days


def year_of(t: float) -> float:
    return 2000.0 + t * 100.0


def precision_advisory(t: float, min_year: int, max_year: int) -> Optional[str]:
    """
    Message when `t` lies outside the range the polynomials are trusted for.
    """
    year = year_of(t)
    if min_year <= year <= max_year:
        return None
    return (
        f"Instant (~{year:.1f}) lies outside {min_year}-{max_year}; "
        "mean-element longitudes lose accuracy when extrapolated this far."
    )

"""
Sidereal time and the tropical ascendant.
"""
import math

from vedic_kundali.domain.kundali.errors import ComputationSingularity
from vedic_kundali.domain.kundali.time_conversion import J2000, julian_century
from vedic_kundali.domain.kundali.zodiac import normalize


OBLIQUITY = 23.44


def greenwich_mean_sidereal_time(jd: float) -> float:
    """
    GMST in degrees (Meeus 12.4).
    """
    t = julian_century(jd)
    gmst = (
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    return normalize(gmst)


def local_sidereal_time(jd: float, longitude: float) -> float:
    return normalize(greenwich_mean_sidereal_time(jd) + longitude)


def tropical_ascendant(
    jd: float,
    latitude: float,
    longitude: float,
    epsilon: float = 1e-6,
) -> float:
    """
    Ecliptic longitude rising on the eastern horizon.

    Raises ComputationSingularity when tan(latitude) blows up near the
    poles or when the ecliptic coincides with the horizon and atan2 has
    no meaningful direction.

    The pole test is `|cos(latitude)| < epsilon`, so the cutoff is
    `90° - degrees(asin(epsilon))`: about 89.99994° for the default 1e-6
    and 89.943° for 1e-3. Latitudes short of the cutoff still return an
    angle; raise epsilon to widen the excluded polar cap.
    """
    lat = math.radians(latitude)
    if abs(math.cos(lat)) < epsilon:
        raise ComputationSingularity(
            f"Ascendant undefined at latitude {latitude}: too close to the pole"
        )

    ramc = math.radians(local_sidereal_time(jd, longitude))
    eps = math.radians(OBLIQUITY)

    y = math.cos(ramc)
    x = -(math.sin(ramc) * math.cos(eps) + math.tan(lat) * math.sin(eps))

    if abs(x) < epsilon and abs(y) < epsilon:
        raise ComputationSingularity(
            f"Ascendant undefined at latitude {latitude}: ecliptic lies on the horizon"
        )

    return normalize(math.degrees(math.atan2(y, x)))

import logging
import warnings
from typing import Dict, List

from vedic_kundali.domain.kundali.ascendant import tropical_ascendant
from vedic_kundali.domain.kundali.ayanamsa import get_ayanamsa
from vedic_kundali.domain.kundali.ephemeris import (
    daily_motion,
    precision_advisory,
    tropical_longitudes,
)
from vedic_kundali.domain.kundali.errors import PrecisionWarning
from vedic_kundali.domain.kundali.time_conversion import DAYS_PER_CENTURY, JulianMoment

logger = logging.getLogger(__name__)


class KundaliCalculator:
    """
    Astronomical calculator for kundali generation.

    This class:
    - Turns a birth instant and location into sidereal longitudes
    - Samples each body twice to get its daily motion
    - Returns raw, structured data (no domain objects)
    """

    def __init__(
        self,
        singularity_epsilon: float = 1e-6,
        motion_sample_days: float = 1.0,
        precision_min_year: int = 1900,
        precision_max_year: int = 2100,
    ):
        self.singularity_epsilon = singularity_epsilon
        self.motion_sample_days = motion_sample_days
        self.precision_min_year = precision_min_year
        self.precision_max_year = precision_max_year

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    def calculate(
        self,
        moment: JulianMoment,
        latitude: float,
        longitude: float,
        ayanamsa: str,
    ) -> Dict:
        """
        Calculate core astronomical data for kundali.

        Returns a normalized dict consumed by KundaliEngine.
        """
        corrector = get_ayanamsa(ayanamsa)
        t = moment.julian_century

        # Step 1: Precision advisory
        advisories = self._advisories(t)

        # Step 2: Ayanamsa
        ayanamsa_degrees = corrector.value(t)

        # Step 3: Ascendant
        tropical_asc = tropical_ascendant(
            moment.julian_day,
            latitude,
            longitude,
            epsilon=self.singularity_epsilon,
        )

        # Step 4: Planets
        precession_per_day = (
            corrector.value(t + 1.0 / DAYS_PER_CENTURY) - ayanamsa_degrees
        )
        planets: Dict[str, Dict] = {}
        for name, tropical in tropical_longitudes(t).items():
            speed = daily_motion(name, t, self.motion_sample_days) - precession_per_day
            planets[name] = {
                "tropical": tropical,
                "longitude": corrector.to_sidereal(tropical, t),
                "speed": speed,
            }
            logger.debug(
                f"{name}: tropical {tropical:.4f}, sidereal "
                f"{planets[name]['longitude']:.4f}, speed {speed:.4f}°/day"
            )

        logger.debug(
            f"JD {moment.julian_day:.6f} (T={t:.8f}), {corrector.name} "
            f"{ayanamsa_degrees:.4f}°, tropical ascendant {tropical_asc:.4f}"
        )

        return {
            "ayanamsa": {
                "name": corrector.name,
                "degrees": ayanamsa_degrees,
            },
            "ascendant": {
                "tropical": tropical_asc,
                "longitude": corrector.to_sidereal(tropical_asc, t),
            },
            "planets": planets,
            "warnings": advisories,
        }

    # ─────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────

    def _advisories(self, t: float) -> List[str]:
        message = precision_advisory(t, self.precision_min_year, self.precision_max_year)
        if message is None:
            return []

        logger.warning(message)
        warnings.warn(message, PrecisionWarning, stacklevel=3)
        return [message]

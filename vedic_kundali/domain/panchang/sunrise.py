"""
Local sunrise from Swiss Ephemeris.

Upper limb with standard refraction, searched from local midnight.
Returns None when the Sun does not rise on that civil date (polar
day or night).
"""
import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

import swisseph as swe

from vedic_kundali.domain.kundali.errors import CalculationError
from vedic_kundali.domain.kundali.time_conversion import julian_day, julian_day_to_datetime

logger = logging.getLogger(__name__)


# Built-in Moshier theory; no ephemeris files on disk
EPHEMERIS_FLAG = swe.FLG_MOSEPH


def sunrise(
    local_date: date,
    latitude: float,
    longitude: float,
    utc_offset: timedelta,
) -> Optional[datetime]:
    """
    Sunrise on `local_date`, as an aware datetime in the given offset.
    """
    tz = timezone(utc_offset)
    start_of_day = datetime.combine(local_date, time(0, 0), tzinfo=tz)
    geopos = (longitude, latitude, 0.0)

    try:
        result, times = swe.rise_trans(
            julian_day(start_of_day), swe.SUN, swe.CALC_RISE, geopos, 0.0, 0.0, EPHEMERIS_FLAG
        )
    except swe.Error as e:
        raise CalculationError(f"Sunrise search failed for {local_date}: {e}") from e

    if result < 0 or not times:
        logger.debug(f"No sunrise on {local_date} at latitude {latitude}")
        return None

    rise = julian_day_to_datetime(times[0]).astimezone(tz)
    # Next rise falls on a later date when the Sun stays below the horizon
    if rise.date() != local_date:
        logger.debug(f"No sunrise on {local_date} at latitude {latitude}")
        return None

    return rise

"""
Civil birth time → UTC instant → Julian Day / Julian century.

The local clock time is never assumed to be UT: an explicit offset must
come from the time itself, from `utc_offset`, or from an IANA zone.
"""
import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from vedic_kundali.domain.kundali.errors import InputError

logger = logging.getLogger(__name__)


J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
J2000_INSTANT = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)

# Real-world civil offsets span UTC-12:00 … UTC+14:00
MAX_UTC_OFFSET = timedelta(hours=14)

OFFSET_PATTERN = re.compile(
    r"^(?:UTC|GMT)?\s*([+-])(\d{1,2})(?::?(\d{2}))?$",
    re.IGNORECASE,
)

OffsetLike = Union[str, int, float, timedelta]


@dataclass(frozen=True)
class JulianMoment:
    """
    A birth instant expressed in the time scales the ephemeris needs.
    """
    utc: datetime
    julian_day: float
    julian_century: float


# ─────────────────────────────────────────────
# Offsets
# ─────────────────────────────────────────────

def parse_utc_offset(value: OffsetLike) -> timedelta:
    """
    Parse "+05:30", "-0400", "UTC+5", "Z", 5.5 or a timedelta.
    """
    if isinstance(value, timedelta):
        offset = value
    elif isinstance(value, bool):
        raise InputError(f"Invalid UTC offset: {value!r}")
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InputError(f"Invalid UTC offset: {value!r}")
        offset = timedelta(hours=value)
    elif isinstance(value, str):
        text = value.strip()
        if text.upper() in {"Z", "UTC", "GMT"}:
            offset = timedelta(0)
        else:
            match = OFFSET_PATTERN.match(text)
            if not match:
                raise InputError(f"Invalid UTC offset: {value!r}")
            sign, hours, minutes = match.groups()
            minutes = int(minutes or 0)
            if minutes >= 60:
                raise InputError(f"Invalid UTC offset: {value!r}")
            offset = timedelta(hours=int(hours), minutes=minutes)
            if sign == "-":
                offset = -offset
    else:
        raise InputError(f"Invalid UTC offset: {value!r}")

    if abs(offset) > MAX_UTC_OFFSET:
        raise InputError(f"UTC offset out of range: {value!r}")

    return offset


def zone_offset(local_dt: datetime, timezone_name: str) -> timedelta:
    """
    UTC offset of an IANA zone at the given (naive) local wall time.

    Raises InputError for a wall time skipped by a DST transition.
    """
    if not isinstance(timezone_name, str):
        raise InputError(f"Timezone must be an IANA name, got {timezone_name!r}")
    try:
        zone = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InputError(f"Unknown timezone {timezone_name!r}") from e

    aware = local_dt.replace(tzinfo=zone)
    wall = aware.astimezone(timezone.utc).astimezone(zone).replace(tzinfo=None)
    if wall != local_dt:
        raise InputError(
            f"Local time {local_dt.isoformat()} does not exist in {timezone_name} "
            "(skipped by a clock change)"
        )

    return aware.utcoffset()


def resolve_offset(
    birth_date: date,
    birth_time: time,
    utc_offset: Optional[OffsetLike] = None,
    timezone_name: Optional[str] = None,
) -> timedelta:
    """
    UTC offset in force for the local birth date & time.

    Raises InputError when no offset source is present or when
    the supplied sources disagree.
    """
    local_dt = datetime.combine(birth_date, birth_time.replace(tzinfo=None))

    offsets: List[timedelta] = []
    if birth_time.tzinfo is not None:
        offsets.append(parse_utc_offset(datetime.combine(birth_date, birth_time).utcoffset()))
    if utc_offset is not None:
        offsets.append(parse_utc_offset(utc_offset))
    if timezone_name:
        offsets.append(zone_offset(local_dt, timezone_name))

    if not offsets:
        raise InputError(
            "Birth time has no UTC offset; supply utc_offset or an IANA timezone"
        )
    if any(o != offsets[0] for o in offsets[1:]):
        raise InputError(f"Conflicting UTC offsets for birth time: {offsets}")

    return offsets[0]


def resolve_utc(
    birth_date: date,
    birth_time: time,
    utc_offset: Optional[OffsetLike] = None,
    timezone_name: Optional[str] = None,
) -> datetime:
    """
    Convert local birth date & time into an aware UTC datetime.
    """
    offset = resolve_offset(birth_date, birth_time, utc_offset, timezone_name)
    local_dt = datetime.combine(birth_date, birth_time.replace(tzinfo=None))

    utc_dt = local_dt.replace(tzinfo=timezone(offset)).astimezone(timezone.utc)
    logger.debug(f"Resolved {local_dt.isoformat()} (offset {offset}) to {utc_dt.isoformat()}")
    return utc_dt


# ─────────────────────────────────────────────
# Julian Day
# ─────────────────────────────────────────────

def julian_day(dt: datetime) -> float:
    """
    Julian Day of an aware datetime (Meeus, proleptic Gregorian).
    """
    if dt.tzinfo is None:
        raise InputError("julian_day requires a timezone-aware datetime")
    dt = dt.astimezone(timezone.utc)

    year = dt.year
    month = dt.month
    seconds = dt.second + dt.microsecond / 1_000_000
    day = dt.day + (dt.hour + (dt.minute + seconds / 60.0) / 60.0) / 24.0

    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + a // 4

    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524.5


def julian_century(jd: float) -> float:
    return (jd - J2000) / DAYS_PER_CENTURY


def julian_day_to_datetime(jd: float) -> datetime:
    return J2000_INSTANT + timedelta(days=jd - J2000)


def to_moment(utc_dt: datetime) -> JulianMoment:
    jd = julian_day(utc_dt)
    return JulianMoment(
        utc=utc_dt.astimezone(timezone.utc),
        julian_day=jd,
        julian_century=julian_century(jd),
    )

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

from vedic_kundali.config import Settings, settings as default_settings
from vedic_kundali.domain.dasha.vimshottari import VimshottariCalculator
from vedic_kundali.domain.kundali.ayanamsa import get_ayanamsa
from vedic_kundali.domain.kundali.calculator import KundaliCalculator
from vedic_kundali.domain.kundali.derived.house_calculator import HouseCalculator
from vedic_kundali.domain.kundali.derived.nakshatra_calculator import NakshatraCalculator
from vedic_kundali.domain.kundali.derived.strength_calculator import (
    StrengthCalculator,
    is_combust,
)
from vedic_kundali.domain.kundali.errors import InputError
from vedic_kundali.domain.kundali.schemas import (
    Ascendant,
    ChartMeta,
    KundaliChart,
    PlanetPosition,
)
from vedic_kundali.domain.kundali.time_conversion import (
    OffsetLike,
    resolve_offset,
    resolve_utc,
    to_moment,
)
from vedic_kundali.domain.kundali.zodiac import (
    PLANET_ORDER,
    degree_in_sign,
    sign_lord,
    sign_name,
    sign_of,
)
from vedic_kundali.domain.panchang.panchang_calculator import PanchangCalculator
from vedic_kundali.security.validators import validate_latitude, validate_longitude

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BirthInput:
    """
    Immutable birth input used for kundali calculation.

    The civil time needs a UTC offset from exactly one consistent
    source: an aware `birth_time`, `utc_offset`, or an IANA `timezone`.
    Invalid input fails on construction.
    """
    birth_date: date
    birth_time: time
    latitude: float
    longitude: float
    utc_offset: Optional[OffsetLike] = None
    timezone: Optional[str] = None
    name: Optional[str] = None
    ayanamsa: str = "Lahiri"

    def __post_init__(self):
        if isinstance(self.birth_date, datetime) or not isinstance(self.birth_date, date):
            raise InputError(f"birth_date must be a date, got {self.birth_date!r}")
        if not isinstance(self.birth_time, time):
            raise InputError(f"birth_time must be a time, got {self.birth_time!r}")

        validate_latitude(self.latitude)
        validate_longitude(self.longitude)
        get_ayanamsa(self.ayanamsa)

        # Fail fast on a missing or conflicting offset
        self.offset()

    def offset(self) -> timedelta:
        return resolve_offset(self.birth_date, self.birth_time, self.utc_offset, self.timezone)

    def to_utc(self) -> datetime:
        return resolve_utc(self.birth_date, self.birth_time, self.utc_offset, self.timezone)

    def to_local(self) -> datetime:
        """
        Birth instant on the local clock, carrying its fixed UTC offset.
        """
        return datetime.combine(
            self.birth_date,
            self.birth_time.replace(tzinfo=None),
            tzinfo=timezone(self.offset()),
        )


class KundaliEngine:
    """
    Orchestrates kundali calculation.

    This class:
    - Accepts birth inputs
    - Delegates astronomy to the calculator
    - Derives houses, strengths, dasha and panchang
    - Returns domain KundaliChart
    """

    calculation_version = "v1"

    def __init__(
        self,
        calculator: KundaliCalculator | None = None,
        config: Settings | None = None,
    ):
        self.config = config or default_settings
        self.calculator = calculator or KundaliCalculator(
            singularity_epsilon=self.config.ASCENDANT_SINGULARITY_EPSILON,
            motion_sample_days=self.config.MOTION_SAMPLE_DAYS,
            precision_min_year=self.config.PRECISION_MIN_YEAR,
            precision_max_year=self.config.PRECISION_MAX_YEAR,
        )
        self.nakshatra_calculator = NakshatraCalculator()
        self.house_calculator = HouseCalculator()
        self.strength_calculator = StrengthCalculator()
        self.dasha_calculator = VimshottariCalculator(
            year_days=self.config.DASHA_YEAR_DAYS,
            nakshatra_calculator=self.nakshatra_calculator,
        )
        self.panchang_calculator = PanchangCalculator(self.nakshatra_calculator)

    def generate(
        self,
        birth: BirthInput,
        as_of: Optional[datetime] = None,
        horizon_years: Optional[float] = None,
    ) -> KundaliChart:
        """
        Generate the core D1 kundali chart.

        This method is:
        - Pure
        - Deterministic
        - Side-effect free

        `as_of` picks the current dasha and defaults to the birth instant.
        """
        if as_of is not None and as_of.tzinfo is None:
            raise InputError("as_of must be a timezone-aware datetime")

        # ─────────────────────────────────────────────
        # Step 1: Birth instant
        # ─────────────────────────────────────────────

        moment = to_moment(birth.to_utc())
        birth_local = birth.to_local()

        # ─────────────────────────────────────────────
        # Step 2: Raw astronomical calculation
        # ─────────────────────────────────────────────

        raw_result = self.calculator.calculate(
            moment=moment,
            latitude=birth.latitude,
            longitude=birth.longitude,
            ayanamsa=birth.ayanamsa,
        )

        # ─────────────────────────────────────────────
        # Step 3: Build Ascendant
        # ─────────────────────────────────────────────

        asc_longitude = raw_result["ascendant"]["longitude"]
        lagna_sign = sign_of(asc_longitude)

        asc = Ascendant(
            longitude=asc_longitude,
            sign=lagna_sign,
            sign_name=sign_name(lagna_sign),
            degree=degree_in_sign(asc_longitude),
            lord=sign_lord(lagna_sign),
            nakshatra=self.nakshatra_calculator.calculate(asc_longitude).to_info(),
        )

        # ─────────────────────────────────────────────
        # Step 4: Build Planet Positions
        # ─────────────────────────────────────────────

        raw_planets = raw_result["planets"]
        longitudes = {name: raw_planets[name]["longitude"] for name in PLANET_ORDER}
        sun_longitude = longitudes["Sun"]

        signs = {name: sign_of(lon) for name, lon in longitudes.items()}
        placements = self.house_calculator.place(signs, lagna_sign)
        combust = {
            name: is_combust(name, lon, sun_longitude)
            for name, lon in longitudes.items()
        }
        strengths = self.strength_calculator.calculate(signs, placements, combust)

        planets: List[PlanetPosition] = []
        for name in PLANET_ORDER:
            lon = longitudes[name]
            speed = raw_planets[name]["speed"]
            planets.append(
                PlanetPosition(
                    name=name,
                    longitude=lon,
                    sign=signs[name],
                    sign_name=sign_name(signs[name]),
                    degree=degree_in_sign(lon),
                    house=placements[name],
                    retrograde=speed < 0,
                    combust=combust[name],
                    speed=speed,
                    nakshatra=self.nakshatra_calculator.calculate(lon).to_info(),
                    strength=strengths[name],
                )
            )

        # ─────────────────────────────────────────────
        # Step 5: Houses, Dasha, Panchang
        # ─────────────────────────────────────────────

        houses = self.house_calculator.calculate(signs, lagna_sign)

        dasha = self.dasha_calculator.calculate(
            moon_longitude=longitudes["Moon"],
            birth_utc=moment.utc,
            horizon_years=(
                horizon_years if horizon_years is not None
                else self.config.DASHA_HORIZON_YEARS
            ),
            levels=self.config.DASHA_LEVELS,
            as_of=as_of,
        )

        panchang = self.panchang_calculator.calculate(
            sun_longitude=sun_longitude,
            moon_longitude=longitudes["Moon"],
            birth_local=birth_local,
            latitude=birth.latitude,
            longitude=birth.longitude,
        )

        # ─────────────────────────────────────────────
        # Step 6: Assemble Kundali Chart
        # ─────────────────────────────────────────────

        meta = ChartMeta(
            name=birth.name,
            ayanamsa=raw_result["ayanamsa"]["name"],
            ayanamsa_degrees=raw_result["ayanamsa"]["degrees"],
            birth_utc=moment.utc,
            julian_day=moment.julian_day,
            julian_century=moment.julian_century,
            calculation_version=self.calculation_version,
            warnings=tuple(raw_result["warnings"]),
        )

        logger.info(
            f"Generated kundali: lagna {asc.sign_name}, "
            f"Moon in {panchang.nakshatra.name}, dasha starts with {dasha.starting_lord}"
        )

        return KundaliChart(
            meta=meta,
            ascendant=asc,
            planets=tuple(planets),
            houses=houses,
            dasha=dasha,
            panchang=panchang,
        )

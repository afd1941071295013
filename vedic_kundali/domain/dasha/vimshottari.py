"""
Vimshottari Dasha sequencing.

The Moon's nakshatra at birth selects the starting lord; the part of the
nakshatra the Moon has already crossed is the part of that lord's period
already spent. The remaining balance opens the timeline, after which lords
follow the fixed cycle with their full weights, end to end.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from vedic_kundali.domain.dasha.schemas import DashaPeriod, DashaTimeline
from vedic_kundali.domain.kundali.derived.nakshatra_calculator import NakshatraCalculator
from vedic_kundali.domain.kundali.errors import InputError

logger = logging.getLogger(__name__)


# Order of Dasha Lords and their duration in years
DASHA_SEQUENCE: Tuple[Tuple[str, int], ...] = (
    ("Ketu", 7), ("Venus", 20), ("Sun", 6), ("Moon", 10),
    ("Mars", 7), ("Rahu", 18), ("Jupiter", 16), ("Saturn", 19), ("Mercury", 17),
)
DASHA_LORDS = tuple(lord for lord, _ in DASHA_SEQUENCE)
DASHA_YEARS = dict(DASHA_SEQUENCE)
TOTAL_CYCLE_YEARS = sum(DASHA_YEARS.values())  # 120


class VimshottariCalculator:
    """
    Builds the Mahadasha (and optionally Antardasha) timeline.
    """

    calculation_version = "v1"

    def __init__(
        self,
        year_days: float = 365.25,
        nakshatra_calculator: NakshatraCalculator | None = None,
    ):
        if year_days <= 0:
            raise InputError(f"Dasha year length must be positive, got {year_days}")
        self.year_days = year_days
        self.nakshatra_calculator = nakshatra_calculator or NakshatraCalculator()

    def calculate(
        self,
        moon_longitude: float,
        birth_utc: datetime,
        horizon_years: float = TOTAL_CYCLE_YEARS,
        levels: int = 2,
        as_of: Optional[datetime] = None,
    ) -> DashaTimeline:
        """
        Calculate the timeline from birth until `horizon_years` are covered.

        `as_of` selects the current period and defaults to the birth instant.
        """
        if not horizon_years > 0:
            raise InputError(f"Dasha horizon must be positive, got {horizon_years}")
        if birth_utc.year + horizon_years + max(DASHA_YEARS.values()) >= 9999:
            raise InputError(f"Dasha horizon of {horizon_years} years runs past year 9999")
        if levels not in (1, 2):
            raise InputError(f"Dasha levels must be 1 or 2, got {levels}")

        nakshatra = self.nakshatra_calculator.calculate(moon_longitude)
        start_idx = nakshatra.index % len(DASHA_SEQUENCE)
        start_lord, start_years = DASHA_SEQUENCE[start_idx]

        # Balance of the birth Mahadasha
        balance_years = start_years * (1.0 - nakshatra.fraction_elapsed)

        logger.debug(
            f"Moon in {nakshatra.name} ({nakshatra.fraction_elapsed:.4f} elapsed): "
            f"{start_lord} balance {balance_years:.4f}y"
        )

        periods: List[DashaPeriod] = []
        start = birth_utc
        covered = 0.0
        i = 0

        while covered < horizon_years:
            lord, full_years = DASHA_SEQUENCE[(start_idx + i) % len(DASHA_SEQUENCE)]
            years = balance_years if i == 0 else float(full_years)
            end = start + self._years(years)

            sub_periods: Tuple[DashaPeriod, ...] = ()
            if levels == 2:
                sub_periods = self._antardashas(
                    lord=lord,
                    maha_start=start,
                    maha_end=end,
                    elapsed_years=full_years - years,
                )

            periods.append(
                DashaPeriod(
                    planet=lord,
                    level=1,
                    start=start,
                    end=end,
                    duration_years=years,
                    balance=i == 0 and nakshatra.fraction_elapsed > 0,
                    sub_periods=sub_periods,
                )
            )

            covered += years
            start = end
            i += 1

        moment = as_of if as_of is not None else birth_utc
        current = next((p for p in periods if p.contains(moment)), None)

        return DashaTimeline(
            moon_nakshatra=nakshatra.name,
            starting_lord=start_lord,
            fraction_elapsed=nakshatra.fraction_elapsed,
            balance_years=balance_years,
            horizon_years=horizon_years,
            current=current,
            periods=tuple(periods),
            calculation_version=self.calculation_version,
        )

    # ─────────────────────────────────────────────
    # Antardasha
    # ─────────────────────────────────────────────

    def _antardashas(
        self,
        lord: str,
        maha_start: datetime,
        maha_end: datetime,
        elapsed_years: float,
    ) -> Tuple[DashaPeriod, ...]:
        """
        Sub-periods of one Mahadasha.

        Antardasha starts with the Mahadasha lord; each lasts
        (Mahadasha years × Antardasha years) / 120. For a balance
        Mahadasha, sub-periods are laid out from the virtual start
        and the ones already over at birth are dropped.
        """
        maha_years = DASHA_YEARS[lord]
        start_idx = DASHA_LORDS.index(lord)

        sub_periods: List[DashaPeriod] = []
        offset = -elapsed_years

        for i in range(len(DASHA_SEQUENCE)):
            sub_lord, sub_weight = DASHA_SEQUENCE[(start_idx + i) % len(DASHA_SEQUENCE)]
            sub_years = maha_years * sub_weight / TOTAL_CYCLE_YEARS
            sub_end_offset = offset + sub_years

            if sub_end_offset > 0:
                begin = max(offset, 0.0)
                start = maha_start + self._years(begin)
                end = maha_start + self._years(sub_end_offset)
                sub_periods.append(
                    DashaPeriod(
                        planet=sub_lord,
                        level=2,
                        start=start,
                        end=end,
                        duration_years=sub_end_offset - begin,
                        balance=offset < 0,
                    )
                )

            offset = sub_end_offset

        # Close on the Mahadasha boundary exactly
        if sub_periods:
            last = sub_periods[-1]
            sub_periods[-1] = last.model_copy(update={"end": maha_end})

        return tuple(sub_periods)

    def _years(self, years: float) -> timedelta:
        return timedelta(days=years * self.year_days)

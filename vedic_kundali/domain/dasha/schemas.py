from datetime import datetime
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class DashaPeriod(BaseModel):
    """
    One planetary period, the half-open interval [start, end).
    """
    model_config = ConfigDict(frozen=True)

    planet: str
    level: int = Field(default=1, ge=1, le=2)
    start: datetime
    end: datetime
    duration_years: float
    balance: bool = Field(
        default=False,
        description="True when the period is only the unexpired part of its full weight",
    )
    sub_periods: Tuple["DashaPeriod", ...] = ()

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


class DashaTimeline(BaseModel):
    """
    Vimshottari Mahadasha sequence from birth up to the requested horizon.
    """
    model_config = ConfigDict(frozen=True)

    system: str = "Vimshottari"
    moon_nakshatra: str
    starting_lord: str
    fraction_elapsed: float = Field(ge=0, le=1)
    balance_years: float
    horizon_years: float
    current: Optional[DashaPeriod] = None
    periods: Tuple[DashaPeriod, ...]
    calculation_version: str

    def upcoming(self) -> Tuple[DashaPeriod, ...]:
        """
        Periods that follow the current one, in order.
        """
        if self.current is None:
            return ()
        index = self.periods.index(self.current)
        return self.periods[index + 1:]

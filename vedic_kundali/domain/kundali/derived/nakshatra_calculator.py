from dataclasses import dataclass
from typing import List, Tuple

from vedic_kundali.domain.kundali.derived.schemas import NakshatraInfo
from vedic_kundali.domain.kundali.zodiac import FULL_CIRCLE, normalize

# (name, ruling planet), Ashwini → Revati
NAKSHATRAS: List[Tuple[str, str]] = [
    ("Ashwini", "Ketu"), ("Bharani", "Venus"), ("Krittika", "Sun"),
    ("Rohini", "Moon"), ("Mrigashira", "Mars"), ("Ardra", "Rahu"),
    ("Punarvasu", "Jupiter"), ("Pushya", "Saturn"), ("Ashlesha", "Mercury"),
    ("Magha", "Ketu"), ("Purva Phalguni", "Venus"), ("Uttara Phalguni", "Sun"),
    ("Hasta", "Moon"), ("Chitra", "Mars"), ("Swati", "Rahu"),
    ("Vishakha", "Jupiter"), ("Anuradha", "Saturn"), ("Jyeshtha", "Mercury"),
    ("Mula", "Ketu"), ("Purva Ashadha", "Venus"), ("Uttara Ashadha", "Sun"),
    ("Shravana", "Moon"), ("Dhanishta", "Mars"), ("Shatabhisha", "Rahu"),
    ("Purva Bhadrapada", "Jupiter"), ("Uttara Bhadrapada", "Saturn"), ("Revati", "Mercury"),
]

NAKSHATRA_COUNT = 27
PADAS_PER_NAKSHATRA = 4
NAKSHATRA_SPAN = FULL_CIRCLE / NAKSHATRA_COUNT  # 13°20′
PADA_SPAN = NAKSHATRA_SPAN / PADAS_PER_NAKSHATRA  # 3°20′


@dataclass(frozen=True)
class NakshatraPosition:
    index: int
    name: str
    lord: str
    pada: int
    fraction_elapsed: float

    def to_info(self) -> NakshatraInfo:
        return NakshatraInfo(
            index=self.index,
            name=self.name,
            lord=self.lord,
            pada=self.pada,
        )


class NakshatraCalculator:
    """
    Maps a sidereal longitude to its nakshatra, lord and pada.
    """

    def calculate(
        self,
        longitude: float
    ) -> NakshatraPosition:
        """
        Resolve nakshatra for any longitude.

        The position is scaled to nakshatra units (lon · 27 / 360) rather
        than divided by the 13.333… span, so exact boundaries such as 40°
        land on index 3 with zero fraction elapsed.
        """
        position = normalize(longitude) * NAKSHATRA_COUNT / FULL_CIRCLE

        index = min(int(position), NAKSHATRA_COUNT - 1)
        fraction = min(max(position - index, 0.0), 1.0)

        # Determine pada (each nakshatra has 4 padas)
        pada = min(int(fraction * PADAS_PER_NAKSHATRA), PADAS_PER_NAKSHATRA - 1) + 1

        name, lord = NAKSHATRAS[index]
        return NakshatraPosition(
            index=index,
            name=name,
            lord=lord,
            pada=pada,
            fraction_elapsed=fraction,
        )

from datetime import datetime, timedelta
from typing import Optional

from vedic_kundali.domain.kundali.derived.nakshatra_calculator import NakshatraCalculator
from vedic_kundali.domain.kundali.zodiac import FULL_CIRCLE, normalize
from vedic_kundali.domain.panchang.schemas import Karana, Panchang, PanchangYoga, Tithi, Vara
from vedic_kundali.domain.panchang.sunrise import sunrise


TITHI_SPAN = 12.0
KARANA_SPAN = 6.0

# Names within one paksha; the 15th is Purnima (Shukla) or Amavasya (Krishna)
TITHI_NAMES = [
    "Pratipada", "Dwitiya", "Tritiya", "Chaturthi", "Panchami",
    "Shashthi", "Saptami", "Ashtami", "Navami", "Dashami",
    "Ekadashi", "Dwadashi", "Trayodashi", "Chaturdashi",
]

YOGA_NAMES = [
    "Vishkambha", "Priti", "Ayushman", "Saubhagya", "Shobhana",
    "Atiganda", "Sukarma", "Dhriti", "Shoola", "Ganda",
    "Vriddhi", "Dhruva", "Vyaghata", "Harshana", "Vajra",
    "Siddhi", "Vyatipata", "Variyan", "Parigha", "Shiva",
    "Siddha", "Sadhya", "Shubha", "Shukla", "Brahma",
    "Indra", "Vaidhriti",
]

MOBILE_KARANAS = [
    "Bava", "Balava", "Kaulava", "Taitila", "Garaja", "Vanija", "Vishti",
]

# Keyed by half-tithi index (0–59)
FIXED_KARANAS = {
    0: "Kimstughna",
    57: "Shakuni",
    58: "Chatushpada",
    59: "Naga",
}

# datetime.weekday() order: Monday = 0
VARAS = [
    ("Somavara", "Monday", "Moon"),
    ("Mangalavara", "Tuesday", "Mars"),
    ("Budhavara", "Wednesday", "Mercury"),
    ("Guruvara", "Thursday", "Jupiter"),
    ("Shukravara", "Friday", "Venus"),
    ("Shanivara", "Saturday", "Saturn"),
    ("Ravivara", "Sunday", "Sun"),
]


class PanchangCalculator:
    """
    Derives Tithi, Yoga, Karana, Nakshatra and Vara
    from the sidereal Sun and Moon.
    """

    calculation_version = "v1"

    def __init__(self, nakshatra_calculator: NakshatraCalculator | None = None):
        self.nakshatra_calculator = nakshatra_calculator or NakshatraCalculator()

    def calculate(
        self,
        sun_longitude: float,
        moon_longitude: float,
        birth_local: datetime,
        latitude: float,
        longitude: float,
    ) -> Panchang:
        """
        Calculate the panchang at the birth instant.

        `birth_local` must carry the birth's UTC offset; sunrise
        is reported in that same offset.
        """
        elongation = normalize(moon_longitude - sun_longitude)

        moon = self.nakshatra_calculator.calculate(moon_longitude)
        day_start = sunrise(
            birth_local.date(),
            latitude,
            longitude,
            birth_local.utcoffset() or timedelta(0),
        )

        return Panchang(
            tithi=self.tithi(elongation),
            yoga=self.yoga(sun_longitude, moon_longitude),
            karana=self.karana(elongation),
            nakshatra=moon.to_info(),
            vara=self.vara(birth_local, day_start),
            sunrise=day_start,
            elongation=elongation,
            calculation_version=self.calculation_version,
        )

    # ─────────────────────────────────────────────
    # Limbs
    # ─────────────────────────────────────────────

    def tithi(self, elongation: float) -> Tithi:
        index = min(int(normalize(elongation) // TITHI_SPAN), 29)
        paksha = "Shukla" if index < 15 else "Krishna"
        within = index % 15

        if within == 14:
            name = "Purnima" if paksha == "Shukla" else "Amavasya"
        else:
            name = TITHI_NAMES[within]

        return Tithi(number=index + 1, name=name, paksha=paksha)

    def yoga(self, sun_longitude: float, moon_longitude: float) -> PanchangYoga:
        total = normalize(sun_longitude + moon_longitude)
        index = min(int(total * 27 / FULL_CIRCLE), 26)
        return PanchangYoga(number=index + 1, name=YOGA_NAMES[index])

    def karana(self, elongation: float) -> Karana:
        index = min(int(normalize(elongation) // KARANA_SPAN), 59)
        name = FIXED_KARANAS.get(index)
        if name is None:
            name = MOBILE_KARANAS[(index - 1) % len(MOBILE_KARANAS)]
        return Karana(number=index + 1, name=name)

    def vara(self, birth_local: datetime, day_start: Optional[datetime]) -> Vara:
        """
        The Vedic day runs sunrise to sunrise; a birth before
        sunrise belongs to the previous weekday.
        """
        day = birth_local.date()
        if day_start is not None and birth_local < day_start:
            day = day - timedelta(days=1)

        name, weekday, lord = VARAS[day.weekday()]
        return Vara(name=name, weekday=weekday, lord=lord)

"""
Zodiac arithmetic shared by every chart component.

Longitudes are plain floats in degrees, always kept in [0, 360).
Signs and houses are 1-based (1 = Mesha / first house).
"""
import math
from typing import List, Tuple


FULL_CIRCLE = 360.0
SIGN_SPAN = 30.0

# (Sanskrit name, English name, lord), Mesha → Meena
SIGNS: List[Tuple[str, str, str]] = [
    ("Mesha", "Aries", "Mars"),
    ("Vrishabha", "Taurus", "Venus"),
    ("Mithuna", "Gemini", "Mercury"),
    ("Karka", "Cancer", "Moon"),
    ("Simha", "Leo", "Sun"),
    ("Kanya", "Virgo", "Mercury"),
    ("Tula", "Libra", "Venus"),
    ("Vrishchika", "Scorpio", "Mars"),
    ("Dhanu", "Sagittarius", "Jupiter"),
    ("Makara", "Capricorn", "Saturn"),
    ("Kumbha", "Aquarius", "Saturn"),
    ("Meena", "Pisces", "Jupiter"),
]

PLANET_ORDER = [
    "Sun", "Moon", "Mars", "Mercury",
    "Jupiter", "Venus", "Saturn", "Rahu", "Ketu",
]

NODES = {"Rahu", "Ketu"}

KENDRA_HOUSES = {1, 4, 7, 10}
TRIKONA_HOUSES = {5, 9}
DUSTHANA_HOUSES = {6, 8, 12}


def normalize(degrees: float) -> float:
    """
    Reduce an angle to [0, 360). Idempotent.
    """
    value = math.fmod(degrees, FULL_CIRCLE)
    if value < 0:
        value += FULL_CIRCLE
    # -1e-20 + 360 rounds to exactly 360
    if value >= FULL_CIRCLE:
        value = 0.0
    return value if value != 0 else 0.0


def angular_difference(a: float, b: float) -> float:
    """
    Signed shortest arc from b to a, in (-180, 180].
    """
    diff = normalize(a - b)
    if diff > 180.0:
        diff -= FULL_CIRCLE
    return diff


def sign_of(longitude: float) -> int:
    return int(normalize(longitude) // SIGN_SPAN) + 1


def degree_in_sign(longitude: float) -> float:
    lon = normalize(longitude)
    return lon - (sign_of(lon) - 1) * SIGN_SPAN


def house_of(sign: int, lagna_sign: int) -> int:
    """
    Whole-sign house of `sign` counted from the lagna sign.
    """
    house = (sign - lagna_sign + 1) % 12
    if house <= 0:
        house += 12
    return house


def sign_of_house(house: int, lagna_sign: int) -> int:
    return (lagna_sign + house - 2) % 12 + 1


def sign_name(sign: int) -> str:
    return SIGNS[sign - 1][0]


def sign_english_name(sign: int) -> str:
    return SIGNS[sign - 1][1]


def sign_lord(sign: int) -> str:
    return SIGNS[sign - 1][2]


def house_category(house: int) -> str:
    if house in KENDRA_HOUSES:
        return "Kendra"
    if house in TRIKONA_HOUSES:
        return "Trikona"
    return "Neutral"



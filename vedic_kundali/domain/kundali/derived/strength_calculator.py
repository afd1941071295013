"""
Deterministic planetary strength.

Replaces a random shadbala with a score built only from chart facts:
sign dignity, house placement, directional strength, whole-sign aspects
received and combustion. Every factor that contributes is reported.
"""
from typing import Dict, List

from vedic_kundali.domain.kundali.derived.schemas import PlanetStrength
from vedic_kundali.domain.kundali.zodiac import (
    DUSTHANA_HOUSES,
    KENDRA_HOUSES,
    NODES,
    PLANET_ORDER,
    TRIKONA_HOUSES,
    angular_difference,
    sign_lord,
)


BASE_SCORE = 50.0

EXALTATION_SIGN = {
    "Sun": 1, "Moon": 2, "Mars": 10, "Mercury": 6,
    "Jupiter": 4, "Venus": 12, "Saturn": 7,
}
DEBILITATION_SIGN = {
    name: (sign + 5) % 12 + 1 for name, sign in EXALTATION_SIGN.items()
}
OWN_SIGNS = {
    "Sun": {5}, "Moon": {4}, "Mars": {1, 8}, "Mercury": {3, 6},
    "Jupiter": {9, 12}, "Venus": {2, 7}, "Saturn": {10, 11},
}

# Naisargika (natural) relationships
FRIENDS = {
    "Sun": {"Moon", "Mars", "Jupiter"},
    "Moon": {"Sun", "Mercury"},
    "Mars": {"Sun", "Moon", "Jupiter"},
    "Mercury": {"Sun", "Venus"},
    "Jupiter": {"Sun", "Moon", "Mars"},
    "Venus": {"Mercury", "Saturn"},
    "Saturn": {"Mercury", "Venus"},
}
ENEMIES = {
    "Sun": {"Venus", "Saturn"},
    "Moon": set(),
    "Mars": {"Mercury"},
    "Mercury": {"Moon"},
    "Jupiter": {"Mercury", "Venus"},
    "Venus": {"Sun", "Moon"},
    "Saturn": {"Sun", "Moon", "Mars"},
}

# House of peak directional strength
DIG_BALA_HOUSE = {
    "Sun": 10, "Mars": 10,
    "Jupiter": 1, "Mercury": 1,
    "Moon": 4, "Venus": 4,
    "Saturn": 7,
}

# Whole-sign drishti, as signs ahead of the planet's own sign (6 = 7th)
DRISHTI_OFFSETS = {
    "Sun": {6}, "Moon": {6}, "Mercury": {6}, "Venus": {6},
    "Mars": {3, 6, 7},
    "Jupiter": {4, 6, 8},
    "Saturn": {2, 6, 9},
    "Rahu": {6}, "Ketu": {6},
}

NATURAL_BENEFICS = {"Jupiter", "Venus", "Mercury", "Moon"}

COMBUSTION_ORB = {
    "Moon": 12.0, "Mars": 17.0, "Mercury": 14.0,
    "Jupiter": 11.0, "Venus": 10.0, "Saturn": 15.0,
}

WEIGHTS = {
    "exalted": 25,
    "own_sign": 15,
    "friendly_sign": 7,
    "enemy_sign": -7,
    "debilitated": -25,
    "kendra_house": 10,
    "trikona_house": 8,
    "dusthana_house": -10,
    "dig_bala": 10,
    "benefic_aspect": 3,
    "malefic_aspect": -3,
    "combust": -10,
}


def is_combust(name: str, longitude: float, sun_longitude: float) -> bool:
    orb = COMBUSTION_ORB.get(name)
    if orb is None:
        return False
    return abs(angular_difference(longitude, sun_longitude)) <= orb


def aspects_received(target: str, planet_signs: Dict[str, int]) -> List[str]:
    """
    Planets casting a whole-sign aspect on the target's sign.
    """
    target_sign = planet_signs[target]
    return [
        name for name in PLANET_ORDER
        if name != target and name in planet_signs
        and (target_sign - planet_signs[name]) % 12 in DRISHTI_OFFSETS[name]
    ]


def strength_level(score: float) -> str:
    if score >= 80:
        return "very_strong"
    if score >= 60:
        return "strong"
    if score >= 40:
        return "medium"
    if score >= 20:
        return "weak"
    return "very_weak"


class StrengthCalculator:
    """
    Scores each planet on a 0–100 scale and ranks them.
    """

    def calculate(
        self,
        planet_signs: Dict[str, int],
        planet_houses: Dict[str, int],
        combust: Dict[str, bool],
    ) -> Dict[str, PlanetStrength]:
        """
        Calculate strength for every planet present in `planet_signs`.
        """
        scored: Dict[str, tuple] = {}

        for name in PLANET_ORDER:
            if name not in planet_signs:
                continue

            factors: List[str] = []
            self._dignity(name, planet_signs[name], factors)
            self._placement(name, planet_houses[name], factors)

            for caster in aspects_received(name, planet_signs):
                kind = "benefic_aspect" if caster in NATURAL_BENEFICS else "malefic_aspect"
                factors.append(f"{kind}:{caster}")

            if combust.get(name):
                factors.append("combust")

            raw = BASE_SCORE + sum(WEIGHTS[f.split(":")[0]] for f in factors)
            score = round(min(max(raw, 0.0), 100.0), 2)
            scored[name] = (score, tuple(factors))

        # Ties keep the canonical planet order
        ordered = sorted(
            scored,
            key=lambda n: (-scored[n][0], PLANET_ORDER.index(n))
        )

        return {
            name: PlanetStrength(
                score=scored[name][0],
                level=strength_level(scored[name][0]),
                rank=ordered.index(name) + 1,
                factors=scored[name][1],
            )
            for name in PLANET_ORDER
            if name in scored
        }

    # ─────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────

    def _dignity(self, name: str, sign: int, factors: List[str]) -> None:
        if name in NODES:
            return

        if EXALTATION_SIGN[name] == sign:
            factors.append("exalted")
        elif sign in OWN_SIGNS[name]:
            factors.append("own_sign")
        elif DEBILITATION_SIGN[name] == sign:
            factors.append("debilitated")
        else:
            dispositor = sign_lord(sign)
            if dispositor in FRIENDS[name]:
                factors.append("friendly_sign")
            elif dispositor in ENEMIES[name]:
                factors.append("enemy_sign")

    def _placement(self, name: str, house: int, factors: List[str]) -> None:
        if house in KENDRA_HOUSES:
            factors.append("kendra_house")
        elif house in TRIKONA_HOUSES:
            factors.append("trikona_house")
        elif house in DUSTHANA_HOUSES:
            factors.append("dusthana_house")

        if DIG_BALA_HOUSE.get(name) == house:
            factors.append("dig_bala")

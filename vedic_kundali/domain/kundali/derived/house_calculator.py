from typing import Dict, List, Tuple

from vedic_kundali.domain.kundali.schemas import House
from vedic_kundali.domain.kundali.zodiac import (
    PLANET_ORDER,
    house_category,
    house_of,
    sign_lord,
    sign_name,
    sign_of_house,
)


class HouseCalculator:
    """
    Builds the twelve whole-sign houses of a chart
    and places planets into them.
    """

    def place(
        self,
        planet_signs: Dict[str, int],
        lagna_sign: int
    ) -> Dict[str, int]:
        """
        House number (1–12) of each planet, given its sign.
        """
        return {
            name: house_of(sign, lagna_sign)
            for name, sign in planet_signs.items()
        }

    def calculate(
        self,
        planet_signs: Dict[str, int],
        lagna_sign: int
    ) -> Tuple[House, ...]:
        """
        Calculate all twelve houses for the given lagna sign.
        """
        placements = self.place(planet_signs, lagna_sign)

        houses: List[House] = []
        for number in range(1, 13):
            sign = sign_of_house(number, lagna_sign)

            # Planets occupying this house, in canonical order
            occupants = tuple(
                name for name in PLANET_ORDER
                if placements.get(name) == number
            )

            houses.append(
                House(
                    number=number,
                    sign=sign,
                    sign_name=sign_name(sign),
                    lord=sign_lord(sign),
                    planets=occupants,
                    category=house_category(number),
                )
            )

        return tuple(houses)

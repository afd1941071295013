import json
import os
import unittest
import warnings
from datetime import date, datetime, time, timezone

from vedic_kundali.config import Settings
from vedic_kundali.domain.kundali.engine import BirthInput, KundaliEngine
from vedic_kundali.domain.kundali.errors import (
    ComputationSingularity,
    InputError,
    PrecisionWarning,
    UnsupportedAyanamsaError,
)
from vedic_kundali.domain.kundali.zodiac import normalize


FIXTURE = os.path.join(os.path.dirname(__file__), "..", "fixtures", "new_delhi_j2000.json")


def load_golden():
    with open(FIXTURE, encoding="utf-8") as f:
        return json.load(f)


def golden_birth(golden, **overrides):
    data = golden["input"]
    fields = dict(
        birth_date=date.fromisoformat(data["birth_date"]),
        birth_time=time.fromisoformat(data["birth_time"]),
        latitude=data["latitude"],
        longitude=data["longitude"],
        utc_offset=data["utc_offset"],
        name=data["name"],
    )
    fields.update(overrides)
    return BirthInput(**fields)


class TestGoldenChart(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.golden = load_golden()
        cls.tolerance = cls.golden["tolerance_degrees"]
        cls.chart = KundaliEngine().generate(golden_birth(cls.golden))

    def test_meta(self):
        expected = self.golden["meta"]
        meta = self.chart.meta
        self.assertEqual(meta.name, "Golden Reference")
        self.assertEqual(meta.ayanamsa, expected["ayanamsa"])
        self.assertAlmostEqual(meta.ayanamsa_degrees, expected["ayanamsa_degrees"])
        self.assertEqual(meta.birth_utc, datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc))
        self.assertEqual(meta.julian_day, expected["julian_day"])
        self.assertEqual(meta.julian_century, expected["julian_century"])
        self.assertEqual(meta.warnings, ())

    def test_ascendant(self):
        expected = self.golden["ascendant"]
        asc = self.chart.ascendant
        self.assertAlmostEqual(asc.longitude, expected["longitude"], delta=self.tolerance)
        self.assertEqual(asc.sign, expected["sign"])
        self.assertEqual(asc.sign_name, expected["sign_name"])
        self.assertEqual(asc.lord, expected["lord"])
        self.assertEqual(asc.nakshatra.name, expected["nakshatra"])
        self.assertEqual(asc.nakshatra.pada, expected["pada"])

    def test_planets(self):
        for name, expected in self.golden["planets"].items():
            with self.subTest(planet=name):
                planet = self.chart.planet(name)
                self.assertAlmostEqual(planet.longitude, expected["longitude"], delta=self.tolerance)
                self.assertEqual(planet.sign, expected["sign"])
                self.assertEqual(planet.house, expected["house"])
                self.assertEqual(planet.nakshatra.name, expected["nakshatra"])
                self.assertEqual(planet.nakshatra.pada, expected["pada"])
                self.assertEqual(planet.retrograde, expected["retrograde"])

    def test_planet_order(self):
        self.assertEqual(
            [p.name for p in self.chart.planets],
            ["Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn", "Rahu", "Ketu"],
        )

    def test_strength_ranking(self):
        ranking = sorted(self.chart.planets, key=lambda p: p.strength.rank)
        self.assertEqual([p.name for p in ranking], self.golden["strength_ranking"])

    def test_no_combustion(self):
        self.assertFalse(any(p.combust for p in self.chart.planets))

    def test_dasha(self):
        expected = self.golden["dasha"]
        dasha = self.chart.dasha
        self.assertEqual(dasha.moon_nakshatra, expected["moon_nakshatra"])
        self.assertEqual(dasha.starting_lord, expected["starting_lord"])
        self.assertAlmostEqual(dasha.balance_years, expected["balance_years"], places=3)
        self.assertEqual([p.planet for p in dasha.periods], expected["sequence"])
        self.assertEqual(dasha.current.planet, expected["current"])

    def test_panchang(self):
        expected = self.golden["panchang"]
        panchang = self.chart.panchang
        self.assertEqual(panchang.tithi.model_dump(), expected["tithi"])
        self.assertEqual(panchang.yoga.model_dump(), expected["yoga"])
        self.assertEqual(panchang.karana.model_dump(), expected["karana"])
        self.assertEqual(panchang.nakshatra.name, expected["nakshatra"])
        self.assertEqual(panchang.vara.model_dump(), expected["vara"])


class TestChartConsistency(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.golden = load_golden()
        cls.chart = KundaliEngine().generate(golden_birth(cls.golden))

    def test_ketu_opposes_rahu(self):
        rahu = self.chart.planet("Rahu").longitude
        ketu = self.chart.planet("Ketu").longitude
        self.assertAlmostEqual(ketu, normalize(rahu + 180.0), places=9)

    def test_houses_agree_with_planets(self):
        self.assertEqual(len(self.chart.houses), 12)
        for house in self.chart.houses:
            for name in house.planets:
                self.assertEqual(self.chart.planet(name).house, house.number)
        placed = sorted(n for h in self.chart.houses for n in h.planets)
        self.assertEqual(placed, sorted(p.name for p in self.chart.planets))

    def test_first_house_is_lagna(self):
        self.assertEqual(self.chart.houses[0].sign, self.chart.ascendant.sign)

    def test_unknown_planet(self):
        with self.assertRaises(KeyError):
            self.chart.planet("Pluto")

    def test_chart_is_immutable(self):
        with self.assertRaises(Exception):
            self.chart.ascendant.sign = 1


class TestDeterminism(unittest.TestCase):
    def test_identical_input_gives_identical_output(self):
        golden = load_golden()
        first = KundaliEngine().generate(golden_birth(golden))
        second = KundaliEngine().generate(golden_birth(golden))
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_iana_zone_matches_explicit_offset(self):
        golden = load_golden()
        by_offset = KundaliEngine().generate(golden_birth(golden))
        by_zone = KundaliEngine().generate(
            golden_birth(golden, utc_offset=None, timezone="Asia/Kolkata")
        )
        self.assertEqual(by_offset.model_dump_json(), by_zone.model_dump_json())


class TestEngineConfiguration(unittest.TestCase):
    def test_dasha_settings(self):
        config = Settings(DASHA_HORIZON_YEARS=50, DASHA_LEVELS=1)
        chart = KundaliEngine(config=config).generate(golden_birth(load_golden()))
        self.assertEqual(
            [p.planet for p in chart.dasha.periods],
            ["Rahu", "Jupiter", "Saturn", "Mercury"],
        )
        self.assertTrue(all(p.sub_periods == () for p in chart.dasha.periods))

    def test_explicit_horizon_overrides_settings(self):
        chart = KundaliEngine().generate(golden_birth(load_golden()), horizon_years=10)
        self.assertEqual([p.planet for p in chart.dasha.periods], ["Rahu", "Jupiter"])

    def test_as_of_selects_current_dasha(self):
        chart = KundaliEngine().generate(
            golden_birth(load_golden()),
            as_of=datetime(2010, 1, 1, tzinfo=timezone.utc),
        )
        self.assertEqual(chart.dasha.current.planet, "Jupiter")

    def test_naive_as_of_rejected(self):
        with self.assertRaises(InputError):
            KundaliEngine().generate(golden_birth(load_golden()), as_of=datetime(2010, 1, 1))


class TestBirthInputValidation(unittest.TestCase):
    def setUp(self):
        self.golden = load_golden()

    def test_missing_offset(self):
        with self.assertRaises(InputError):
            golden_birth(self.golden, utc_offset=None)

    def test_latitude_out_of_range(self):
        with self.assertRaises(InputError):
            golden_birth(self.golden, latitude=95.0)

    def test_longitude_out_of_range(self):
        with self.assertRaises(InputError):
            golden_birth(self.golden, longitude=-181.0)

    def test_non_finite_coordinate(self):
        with self.assertRaises(InputError):
            golden_birth(self.golden, latitude=float("nan"))

    def test_date_type(self):
        with self.assertRaises(InputError):
            golden_birth(self.golden, birth_date="2000-01-01")

    def test_unsupported_ayanamsa(self):
        with self.assertRaises(UnsupportedAyanamsaError):
            golden_birth(self.golden, ayanamsa="Raman")

    def test_nonexistent_local_time(self):
        with self.assertRaises(InputError):
            BirthInput(
                birth_date=date(2021, 3, 14),
                birth_time=time(2, 30),
                latitude=40.7,
                longitude=-74.0,
                timezone="America/New_York",
            )

    def test_local_time_keeps_offset(self):
        birth = golden_birth(self.golden)
        self.assertEqual(birth.to_local().hour, 17)
        self.assertEqual(birth.to_utc().hour, 12)


class TestEngineFailures(unittest.TestCase):
    def test_polar_birth_is_singular(self):
        birth = golden_birth(load_golden(), latitude=90.0)
        with self.assertRaises(ComputationSingularity):
            KundaliEngine().generate(birth)

    def test_configured_polar_cap(self):
        config = Settings(ASCENDANT_SINGULARITY_EPSILON=1e-3)
        birth = golden_birth(load_golden(), latitude=89.999)
        with self.assertRaises(ComputationSingularity):
            KundaliEngine(config=config).generate(birth)

    def test_precision_warning_is_metadata(self):
        birth = golden_birth(load_golden(), birth_date=date(1850, 6, 1))
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            chart = KundaliEngine().generate(birth)

        self.assertTrue(any(issubclass(w.category, PrecisionWarning) for w in caught))
        self.assertEqual(len(chart.meta.warnings), 1)
        self.assertIn("1850", chart.meta.warnings[0])


if __name__ == "__main__":
    unittest.main()

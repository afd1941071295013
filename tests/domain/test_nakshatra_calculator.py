import unittest

from vedic_kundali.domain.kundali.derived.nakshatra_calculator import (
    NAKSHATRAS,
    NakshatraCalculator,
)


class TestNakshatraCalculator(unittest.TestCase):
    def setUp(self):
        self.calculator = NakshatraCalculator()

    def test_start_of_zodiac(self):
        result = self.calculator.calculate(0.0)
        self.assertEqual(result.index, 0)
        self.assertEqual(result.name, "Ashwini")
        self.assertEqual(result.lord, "Ketu")
        self.assertEqual(result.pada, 1)
        self.assertEqual(result.fraction_elapsed, 0.0)

    def test_exact_boundary_starts_next_nakshatra(self):
        # 40° = 3 × 13°20′, the first point of Rohini
        result = self.calculator.calculate(40.0)
        self.assertEqual(result.name, "Rohini")
        self.assertEqual(result.fraction_elapsed, 0.0)
        self.assertEqual(result.pada, 1)

    def test_end_of_zodiac(self):
        result = self.calculator.calculate(359.9999)
        self.assertEqual(result.name, "Revati")
        self.assertEqual(result.pada, 4)

    def test_wraps_full_circle(self):
        self.assertEqual(self.calculator.calculate(360.0).name, "Ashwini")
        self.assertEqual(self.calculator.calculate(-1.0).name, "Revati")

    def test_padas(self):
        # Swati spans 186°40′ – 200°00′
        result = self.calculator.calculate(198.9163)
        self.assertEqual(result.name, "Swati")
        self.assertEqual(result.lord, "Rahu")
        self.assertEqual(result.pada, 4)
        self.assertAlmostEqual(result.fraction_elapsed, 0.9187, places=3)

    def test_ranges_over_whole_circle(self):
        for tenth in range(3600):
            result = self.calculator.calculate(tenth / 10.0)
            self.assertTrue(0 <= result.index <= 26)
            self.assertTrue(1 <= result.pada <= 4)
            self.assertTrue(0.0 <= result.fraction_elapsed < 1.0)

    def test_lords_repeat_every_nine(self):
        lords = [lord for _, lord in NAKSHATRAS]
        self.assertEqual(lords[:9], lords[9:18])
        self.assertEqual(lords[9:18], lords[18:])

    def test_to_info(self):
        info = self.calculator.calculate(76.3457).to_info()
        self.assertEqual(info.name, "Ardra")
        self.assertEqual(info.index, 5)
        self.assertEqual(info.pada, 3)


if __name__ == "__main__":
    unittest.main()

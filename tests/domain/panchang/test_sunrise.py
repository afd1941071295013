import unittest
from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

import swisseph as swe

from vedic_kundali.domain.kundali.errors import CalculationError
from vedic_kundali.domain.panchang.sunrise import sunrise


IST = timedelta(hours=5, minutes=30)
EDT = timedelta(hours=-4)


class TestSunrise(unittest.TestCase):
    def test_new_delhi_new_year_2000(self):
        rise = sunrise(date(2000, 1, 1), 28.6139, 77.2090, IST)
        self.assertEqual(rise.utcoffset(), IST)
        self.assertEqual(rise.date(), date(2000, 1, 1))
        expected = datetime(2000, 1, 1, 7, 14, tzinfo=timezone(IST))
        self.assertLess(abs(rise - expected), timedelta(minutes=3))

    def test_western_longitude(self):
        # New York, June solstice 2021: 05:25 EDT
        rise = sunrise(date(2021, 6, 21), 40.7128, -74.0060, EDT)
        self.assertEqual(rise.date(), date(2021, 6, 21))
        expected = datetime(2021, 6, 21, 5, 25, tzinfo=timezone(EDT))
        self.assertLess(abs(rise - expected), timedelta(minutes=3))

    def test_northern_summer_is_earlier(self):
        winter = sunrise(date(2000, 1, 1), 28.6139, 77.2090, IST)
        summer = sunrise(date(2000, 6, 21), 28.6139, 77.2090, IST)
        self.assertLess(summer.time(), winter.time())

    def test_offset_only_changes_representation(self):
        # Both searches start at a midnight before the same sunrise
        local = sunrise(date(2000, 1, 1), 28.6139, 77.2090, IST)
        utc = sunrise(date(2000, 1, 1), 28.6139, 77.2090, timedelta(0))
        self.assertLess(abs(local - utc), timedelta(seconds=1))

    def test_polar_night(self):
        self.assertIsNone(sunrise(date(2000, 1, 1), 80.0, 15.0, timedelta(hours=1)))

    def test_polar_day(self):
        self.assertIsNone(sunrise(date(2000, 6, 21), 80.0, 15.0, timedelta(hours=2)))

    @patch("vedic_kundali.domain.panchang.sunrise.swe.rise_trans")
    def test_ephemeris_error_is_calculation_error(self, mock_rise_trans):
        mock_rise_trans.side_effect = swe.Error("bad geopos")
        with self.assertRaises(CalculationError):
            sunrise(date(2000, 1, 1), 28.6139, 77.2090, IST)


if __name__ == "__main__":
    unittest.main()

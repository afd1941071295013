import unittest
from datetime import date, time, timedelta

from vedic_kundali.domain.kundali.errors import InputError
from vedic_kundali.security.validators import (
    sanitize_string,
    validate_date_format,
    validate_latitude,
    validate_longitude,
    validate_name,
    validate_time_format,
)


class TestValidators(unittest.TestCase):
    def test_sanitize_string(self):
        self.assertEqual(sanitize_string("  Asha\x00 "), "Asha")
        self.assertEqual(len(sanitize_string("x" * 600)), 500)

    def test_validate_name(self):
        self.assertEqual(validate_name(" Mary-Jane O'Neil "), "Mary-Jane O'Neil")
        self.assertEqual(validate_name("José Núñez"), "José Núñez")
        for bad in ("", None, "Robert'); DROP TABLE"):
            with self.assertRaises(InputError):
                validate_name(bad)

    def test_validate_date_format(self):
        self.assertEqual(validate_date_format("1987-07-14"), date(1987, 7, 14))
        self.assertEqual(validate_date_format(date(1987, 7, 14)), date(1987, 7, 14))
        for bad in ("14-07-1987", "1987-13-01", 19870714):
            with self.assertRaises(InputError):
                validate_date_format(bad)

    def test_validate_time_format(self):
        self.assertEqual(validate_time_format("05:45"), time(5, 45))
        self.assertEqual(validate_time_format("05:45:30"), time(5, 45, 30))

        aware = validate_time_format("05:45-03:00")
        self.assertEqual(aware.utcoffset(), timedelta(hours=-3))
        self.assertEqual(validate_time_format("05:45Z").utcoffset(), timedelta(0))
        self.assertEqual(validate_time_format("05:45+14:00").utcoffset(), timedelta(hours=14))

        for bad in ("5:45", "25:00", "noon", "12:00+23:00", "12:00-14:30"):
            with self.assertRaises(InputError):
                validate_time_format(bad)

    def test_coordinates(self):
        self.assertEqual(validate_latitude(-90), -90.0)
        self.assertEqual(validate_longitude(180), 180.0)
        for bad in (90.01, float("inf"), True, "10"):
            with self.assertRaises(InputError):
                validate_latitude(bad)
        with self.assertRaises(InputError):
            validate_longitude(-180.5)


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for angle utilities.
"""

import unittest

from aurora_verdict.api.core.utils import degrees_to_dms, format_latitude, format_longitude, normalize_longitude


class TestDegreesToDms(unittest.TestCase):
    """Test suite for degrees_to_dms"""

    def test_positive(self):
        d, m, s, sign = degrees_to_dms(65.5)
        self.assertEqual((d, m, sign), (65, 30, "+"))
        self.assertAlmostEqual(s, 0.0, places=6)

    def test_negative(self):
        d, m, s, sign = degrees_to_dms(-54.25)
        self.assertEqual((d, m, sign), (54, 15, "-"))
        self.assertAlmostEqual(s, 0.0, places=6)


class TestNormalizeLongitude(unittest.TestCase):
    """Test suite for normalize_longitude"""

    def test_in_range_unchanged(self):
        self.assertAlmostEqual(normalize_longitude(18.9), 18.9)
        self.assertAlmostEqual(normalize_longitude(-147.7), -147.7)

    def test_wraps(self):
        self.assertAlmostEqual(normalize_longitude(190.0), -170.0)
        self.assertAlmostEqual(normalize_longitude(-200.0), 160.0)


class TestFormatting(unittest.TestCase):
    """Test suite for latitude/longitude formatting"""

    def test_format_latitude(self):
        self.assertEqual(format_latitude(65.5), "65°30'00\" N")
        self.assertEqual(format_latitude(-54.25), "54°15'00\" S")

    def test_format_longitude(self):
        self.assertEqual(format_longitude(18.5), "18°30'00\" E")
        self.assertEqual(format_longitude(-147.75), "147°45'00\" W")


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the aurora visibility classifier.
"""

import unittest

from aurora_verdict.api.core.enums import Hemisphere, QualityTier
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.geomagnetic.visibility import assess_visibility, describe_location, kp_needed


class TestAssessVisibility(unittest.TestCase):
    """Test suite for assess_visibility at Kp 3 (oval 59.5 / 65.5 / 70.5)"""

    def test_too_far_equatorward(self):
        result = assess_visibility(50.0, 3)
        self.assertFalse(result.is_visible)
        self.assertEqual(result.quality_tier, QualityTier.NONE)
        self.assertEqual(result.message, "Aurora too far north (need Kp 7+)")

    def test_out_of_reach(self):
        result = assess_visibility(30.0, 3)
        self.assertEqual(result.message, "Aurora too far north (out of reach even at Kp 9)")

    def test_tiers(self):
        cases = [
            (57.0, QualityTier.POOR, "Faint glow on northern horizon"),
            (60.0, QualityTier.FAIR, "Aurora low on northern horizon"),
            (62.0, QualityTier.GOOD, "Aurora visible in northern sky"),
            (65.71, QualityTier.EXCELLENT, "Aurora overhead or in south sky"),
            (69.6, QualityTier.GOOD, "Aurora visible to the south"),
            (74.33, QualityTier.NONE, "Too far north - inside polar cap"),
        ]
        for latitude, tier, message in cases:
            with self.subTest(latitude=latitude):
                result = assess_visibility(latitude, 3)
                self.assertEqual(result.quality_tier, tier)
                self.assertEqual(result.message, message)
                self.assertEqual(result.is_visible, tier is not QualityTier.NONE)

    def test_boundaries_are_half_open(self):
        """A latitude exactly on a boundary belongs to the band above it"""
        self.assertEqual(assess_visibility(56.5, 3).quality_tier, QualityTier.POOR)
        self.assertEqual(assess_visibility(59.5, 3).quality_tier, QualityTier.FAIR)
        self.assertEqual(assess_visibility(61.5, 3).quality_tier, QualityTier.GOOD)
        self.assertEqual(assess_visibility(63.5, 3).quality_tier, QualityTier.EXCELLENT)
        self.assertEqual(assess_visibility(68.5, 3).quality_tier, QualityTier.GOOD)
        self.assertEqual(assess_visibility(73.5, 3).quality_tier, QualityTier.NONE)

    def test_hemisphere_symmetry(self):
        """Tier depends on |latitude| only; wording follows the hemisphere"""
        for latitude in (40.0, 57.0, 60.0, 62.0, 65.71, 69.6, 74.33):
            for kp in (0, 3, 6, 9):
                with self.subTest(latitude=latitude, kp=kp):
                    north = assess_visibility(latitude, kp)
                    south = assess_visibility(-latitude, kp)
                    self.assertEqual(north.quality_tier, south.quality_tier)
                    self.assertEqual(north.is_visible, south.is_visible)
                    self.assertEqual(north.hemisphere, Hemisphere.NORTHERN)
                    self.assertEqual(south.hemisphere, Hemisphere.SOUTHERN)

    def test_southern_wording(self):
        self.assertEqual(assess_visibility(-62.0, 3).message, "Aurora visible in southern sky")
        self.assertEqual(assess_visibility(-65.71, 3).message, "Aurora overhead or in north sky")
        self.assertEqual(assess_visibility(-50.0, 3).message, "Aurora too far south (need Kp 7+)")

    def test_storm_reaches_mid_latitudes(self):
        """London (47.89 geomagnetic) only sees the aurora at Kp 7 and above"""
        expected = {
            6: QualityTier.NONE,
            7: QualityTier.POOR,
            8: QualityTier.FAIR,
            9: QualityTier.GOOD,
        }
        for kp, tier in expected.items():
            with self.subTest(kp=kp):
                self.assertEqual(assess_visibility(47.89, kp).quality_tier, tier)

    def test_invalid_inputs(self):
        with self.assertRaises(InputRangeError):
            assess_visibility(91.0, 3)
        with self.assertRaises(InputRangeError):
            assess_visibility(60.0, 9.5)

    def test_to_dict_keys(self):
        self.assertEqual(
            set(assess_visibility(62.0, 3).to_dict()),
            {"isVisible", "qualityTier", "message", "hemisphere", "geomagneticLatitude"},
        )


class TestKpNeeded(unittest.TestCase):
    """Test suite for kp_needed"""

    def test_values(self):
        self.assertEqual(kp_needed(67.0), 0)
        self.assertEqual(kp_needed(70.0), 0)
        self.assertEqual(kp_needed(60.0), 3)
        self.assertEqual(kp_needed(50.0), 7)
        self.assertEqual(kp_needed(30.0), 15)


class TestDescribeLocation(unittest.TestCase):
    """Test suite for describe_location"""

    def test_tromso(self):
        description = describe_location(69.6, 18.9, 3)
        self.assertAlmostEqual(description.geomagnetic.latitude, 65.71, places=2)
        self.assertEqual(description.oval.center_latitude, 65.5)
        self.assertEqual(description.visibility.quality_tier, QualityTier.EXCELLENT)

    def test_validates_kp_first(self):
        with self.assertRaises(InputRangeError) as ctx:
            describe_location(69.6, 18.9, 12)
        self.assertEqual(ctx.exception.field, "kp")

    def test_to_dict(self):
        data = describe_location(64.8, -147.7, 2).to_dict()
        self.assertEqual(set(data), {"geographic", "geomagnetic", "ovalPosition", "visibility"})


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the physics plausibility validator.
"""

import unittest

from aurora_verdict.api.core.enums import PhysicsFlag
from aurora_verdict.api.core.types import SpaceWeatherSample
from aurora_verdict.api.verdict.physics import certainty_label, validate_physics


def _sample(**overrides):
    values = {"kp": 3.0, "bz": -2.0, "bt": 6.0, "speed": 450.0, "density": 5.0}
    values.update(overrides)
    return SpaceWeatherSample(**values)


class TestValidatePhysics(unittest.TestCase):
    """Test suite for validate_physics"""

    def test_valid(self):
        result = validate_physics(_sample())
        self.assertEqual(result.flag, PhysicsFlag.VALID)
        self.assertEqual(result.certainty, 100)
        self.assertIsNone(result.tip_note)
        self.assertFalse(result.is_impossible)

    def test_severe_storm_with_northward_bz_is_impossible(self):
        with self.assertLogs("aurora_verdict.api.verdict.physics", level="WARNING"):
            result = validate_physics(_sample(kp=8, bz=5, bt=10, speed=500))
        self.assertEqual(result.flag, PhysicsFlag.IMPOSSIBLE)
        self.assertEqual(result.certainty, 0)
        self.assertEqual(result.rule, "severe_storm_northward_bz")
        self.assertTrue(result.is_impossible)

    def test_severe_storm_with_quiet_wind_is_impossible(self):
        result = validate_physics(_sample(kp=8.3, bz=-5, speed=350, density=2))
        self.assertEqual(result.rule, "severe_storm_quiet_wind")
        self.assertEqual(result.flag, PhysicsFlag.IMPOSSIBLE)

    def test_strong_northward_bz_is_unlikely(self):
        result = validate_physics(_sample(kp=6, bz=12, speed=450))
        self.assertEqual(result.flag, PhysicsFlag.UNLIKELY)
        self.assertEqual(result.certainty, 30)

    def test_coronal_hole_stream(self):
        result = validate_physics(_sample(speed=850, density=2))
        self.assertEqual(result.flag, PhysicsFlag.RARE)
        self.assertEqual(result.rule, "coronal_hole_stream")
        self.assertEqual(result.certainty, 75)

    def test_compression_region(self):
        result = validate_physics(_sample(speed=350, density=30))
        self.assertEqual(result.rule, "compression_region")

    def test_kp_lagging(self):
        result = validate_physics(_sample(kp=3, bz=-12, speed=650))
        self.assertEqual(result.flag, PhysicsFlag.TIMING_DEPENDENT)
        self.assertEqual(result.certainty, 90)
        self.assertEqual(result.tip_note, "NOTE: Kp index lagging - conditions may intensify soon!")

    def test_kp_persistence(self):
        result = validate_physics(_sample(kp=7, bz=2, speed=500))
        self.assertEqual(result.rule, "kp_persistence")
        self.assertEqual(result.certainty, 85)
        self.assertEqual(result.tip_note, "NOTE: Storm weakening - activity declining despite high Kp.")

    def test_first_matching_rule_wins(self):
        """Northward Bz with slow, sparse wind at Kp 8 reports the Bz rule"""
        result = validate_physics(_sample(kp=8, bz=12, speed=300, density=2))
        self.assertEqual(result.rule, "severe_storm_northward_bz")

    def test_uses_effective_kp(self):
        """Hp30 of 8 with northward Bz is impossible even when Kp is 3"""
        result = validate_physics(_sample(kp=3, hp30=8, bz=2))
        self.assertEqual(result.flag, PhysicsFlag.IMPOSSIBLE)


class TestCertaintyLabel(unittest.TestCase):
    """Test suite for certainty_label"""

    def test_labels(self):
        self.assertEqual(certainty_label(100), "Very certain")
        self.assertEqual(certainty_label(90), "Confident")
        self.assertEqual(certainty_label(75), "Fairly confident")
        self.assertEqual(certainty_label(50), "Uncertain")
        self.assertEqual(certainty_label(30), "Low confidence")
        self.assertEqual(certainty_label(0), "Very low confidence")


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for validation module.
"""

import math
import unittest

from aurora_verdict.api.core.enums import SubstormPhase
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.types import GeographicPoint, SpaceWeatherSample
from aurora_verdict.api.core.validation import (
    check_finite,
    check_non_negative,
    check_range,
    validate_coordinates,
    validate_kp,
    validate_latitude,
    validate_point,
    validate_sample,
    validate_substorm_phase,
)


def _sample(**overrides):
    values = {"kp": 3.0, "bz": -2.0, "bt": 6.0, "speed": 450.0, "density": 5.0}
    values.update(overrides)
    return SpaceWeatherSample(**values)


class TestPrimitiveChecks(unittest.TestCase):
    """Test suite for the primitive range checks"""

    def test_check_finite_rejects_nan_and_infinity(self):
        for value in (math.nan, math.inf, -math.inf):
            with self.assertRaises(InputRangeError):
                check_finite("bz", value)

    def test_check_finite_rejects_booleans(self):
        with self.assertRaises(InputRangeError):
            check_finite("bz", True)

    def test_check_finite_accepts_ints(self):
        check_finite("bz", -5)

    def test_check_range_inclusive(self):
        check_range("kp", 0.0, 0.0, 9.0)
        check_range("kp", 9.0, 0.0, 9.0)
        with self.assertRaises(InputRangeError):
            check_range("kp", 9.01, 0.0, 9.0)

    def test_check_non_negative(self):
        check_non_negative("speed", 0.0)
        with self.assertRaises(InputRangeError) as ctx:
            check_non_negative("speed", -1.0)
        self.assertEqual(ctx.exception.field, "speed")


class TestValidators(unittest.TestCase):
    """Test suite for the public validators"""

    def test_validate_kp(self):
        self.assertEqual(validate_kp(4.33), 4.33)
        with self.assertRaises(InputRangeError):
            validate_kp(-0.1)
        with self.assertRaises(InputRangeError):
            validate_kp(math.nan)

    def test_validate_kp_field_name(self):
        with self.assertRaises(InputRangeError) as ctx:
            validate_kp(10, field="hp30")
        self.assertEqual(ctx.exception.field, "hp30")

    def test_validate_latitude(self):
        self.assertEqual(validate_latitude(-90.0), -90.0)
        with self.assertRaises(InputRangeError):
            validate_latitude(90.5)

    def test_validate_coordinates(self):
        validate_coordinates(69.6, 18.9)
        with self.assertRaises(InputRangeError) as ctx:
            validate_coordinates(45.0, 181.0)
        self.assertEqual(ctx.exception.field, "longitude")

    def test_validate_point(self):
        point = GeographicPoint(64.8, -147.7)
        self.assertIs(validate_point(point), point)
        with self.assertRaises(InputRangeError):
            validate_point(GeographicPoint(-91.0, 0.0))


class TestValidateSample(unittest.TestCase):
    """Test suite for validate_sample"""

    def test_valid_sample(self):
        sample = _sample(by=3.0, hp30=4.0, magnetometer_delta_b=150.0, substorm_phase=SubstormPhase.ONSET)
        self.assertIs(validate_sample(sample), sample)

    def test_signed_fields_may_be_negative(self):
        validate_sample(_sample(bz=-30.0, by=-12.0))

    def test_rejects_each_bad_field(self):
        cases = {
            "kp": 9.5,
            "bz": math.nan,
            "bt": -1.0,
            "speed": -300.0,
            "density": -0.5,
            "by": math.inf,
            "hp30": 10.0,
            "magnetometer_delta_b": -20.0,
        }
        for field, value in cases.items():
            with self.subTest(field=field):
                with self.assertRaises(InputRangeError) as ctx:
                    validate_sample(_sample(**{field: value}))
                self.assertEqual(ctx.exception.field, field)


class TestValidateSubstormPhase(unittest.TestCase):
    """Test suite for validate_substorm_phase"""

    def test_known_phases(self):
        self.assertIs(validate_substorm_phase("onset"), SubstormPhase.ONSET)
        self.assertIs(validate_substorm_phase(SubstormPhase.RECOVERY), SubstormPhase.RECOVERY)

    def test_unknown_phase(self):
        for value in ("expanson", "EXPANSION", ""):
            with self.subTest(value=value):
                with self.assertRaises(InputRangeError) as ctx:
                    validate_substorm_phase(value)
                self.assertEqual(ctx.exception.field, "substorm_phase")
                self.assertIn("expansion", ctx.exception.expected)

    def test_sample_with_unknown_phase(self):
        with self.assertRaises(InputRangeError) as ctx:
            validate_sample(_sample(substorm_phase="expanson"))
        self.assertEqual(ctx.exception.field, "substorm_phase")


if __name__ == "__main__":
    unittest.main()

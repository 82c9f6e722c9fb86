"""
Unit tests for location-aware aurora appearance prediction.
"""

import unittest

from aurora_verdict.api.appearance.prediction import (
    BRIGHTNESS_TABLE,
    COLOR_TABLE,
    STRUCTURE_TABLE,
    classify_scenario,
    predict_appearance,
    viewing_scenario,
)
from aurora_verdict.api.core.config import EngineConfig
from aurora_verdict.api.core.enums import ApparentBrightness, LookingToward, ViewingScenario
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.types import GeographicPoint, SpaceWeatherSample
from aurora_verdict.api.geomagnetic.oval import oval_geometry
from aurora_verdict.api.reference.cities import load_reference_cities


TROMSO = GeographicPoint(69.6, 18.9)
LONGYEARBYEN = GeographicPoint(78.2, 15.6)
NEW_YORK = GeographicPoint(40.7, -74.0)
MIAMI = GeographicPoint(25.7, -80.2)
USHUAIA = GeographicPoint(-54.8, -68.3)


class TestViewingScenario(unittest.TestCase):
    """Test suite for scenario classification"""

    def test_under_oval_center(self):
        self.assertEqual(viewing_scenario(69.6, 3), ViewingScenario.UNDER_OVAL_CENTER)
        self.assertEqual(viewing_scenario(65.71, 3), ViewingScenario.UNDER_OVAL_CENTER)

    def test_under_oval_edge(self):
        self.assertEqual(viewing_scenario(60.0, 3), ViewingScenario.UNDER_OVAL_EDGE)

    def test_below_oval_close(self):
        self.assertEqual(viewing_scenario(57.0, 3), ViewingScenario.BELOW_OVAL_CLOSE)

    def test_polar_cap_starts_at_poleward_edge(self):
        self.assertEqual(viewing_scenario(70.6, 3), ViewingScenario.POLAR_CAP)
        self.assertEqual(viewing_scenario(74.33, 3), ViewingScenario.POLAR_CAP)
        self.assertEqual(viewing_scenario(71.5, 3), ViewingScenario.POLAR_CAP)
        self.assertEqual(viewing_scenario(-71.5, 3), ViewingScenario.POLAR_CAP)
        self.assertEqual(viewing_scenario(70.5, 3), ViewingScenario.UNDER_OVAL_CENTER)

    def test_far_below_quiet_oval_not_visible(self):
        self.assertEqual(viewing_scenario(47.0, 4), ViewingScenario.NOT_VISIBLE)

    def test_storm_reaches_below_oval(self):
        """Kp 5+ brings red emission down to 45 degrees geomagnetic"""
        self.assertEqual(viewing_scenario(47.0, 5), ViewingScenario.BELOW_OVAL_FAR)

    def test_extreme_storm_reaches_low_latitudes(self):
        self.assertEqual(viewing_scenario(40.0, 7.9), ViewingScenario.NOT_VISIBLE)
        self.assertEqual(viewing_scenario(40.0, 8), ViewingScenario.EXTREME_LOW_LAT)

    def test_hemisphere_symmetry(self):
        for latitude in (40.0, 47.0, 57.0, 60.0, 65.71, 74.33):
            for kp in (0, 3, 5, 8, 9):
                with self.subTest(latitude=latitude, kp=kp):
                    self.assertEqual(viewing_scenario(latitude, kp), viewing_scenario(-latitude, kp))

    def test_classify_scenario_direct(self):
        oval = oval_geometry(3)
        self.assertEqual(classify_scenario(65.0, oval, True, 3), ViewingScenario.UNDER_OVAL_CENTER)
        self.assertEqual(classify_scenario(40.0, oval, False, 3), ViewingScenario.NOT_VISIBLE)

    def test_invalid_latitude(self):
        with self.assertRaises(InputRangeError):
            viewing_scenario(-95.0, 3)


class TestPredictionTables(unittest.TestCase):
    """Every scenario has colors, structure and brightness bands ending at Kp 0"""

    def test_tables_cover_every_scenario(self):
        for table in (COLOR_TABLE, STRUCTURE_TABLE, BRIGHTNESS_TABLE):
            for scenario in ViewingScenario:
                with self.subTest(scenario=scenario):
                    bands = table[scenario]
                    self.assertEqual(bands[-1][0], 0)
                    thresholds = [min_kp for min_kp, _ in bands]
                    self.assertEqual(thresholds, sorted(thresholds, reverse=True))


class TestPredictAppearance(unittest.TestCase):
    """Test suite for predict_appearance"""

    @classmethod
    def setUpClass(cls):
        cls.config = EngineConfig(reference_cities=load_reference_cities())

    def test_tromso_quiet(self):
        prediction = predict_appearance(TROMSO, 3, config=self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.UNDER_OVAL_CENTER)
        self.assertEqual(prediction.expected_colors, ("Green", "Yellow-Green"))
        self.assertEqual(prediction.dominant_color, "Pale Green")
        self.assertEqual(prediction.apparent_brightness, ApparentBrightness.MODERATE)
        self.assertEqual(prediction.looking_toward, LookingToward.OVERHEAD)
        self.assertEqual(prediction.camera_guidance.iso, "3200-6400")
        self.assertIn("Northern Lights", prediction.summary)
        self.assertIsNone(prediction.verdict)

    def test_polar_cap_looks_toward_equator(self):
        prediction = predict_appearance(LONGYEARBYEN, 3, config=self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.POLAR_CAP)
        self.assertEqual(prediction.looking_toward, LookingToward.SOUTHERN_HORIZON)
        self.assertEqual(prediction.apparent_brightness, ApparentBrightness.FAINT)
        self.assertIn("Look toward the south", prediction.summary)

    def test_new_york_in_severe_storm(self):
        prediction = predict_appearance(NEW_YORK, 8, config=self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.EXTREME_LOW_LAT)
        self.assertEqual(prediction.dominant_color, "Blood Red")
        self.assertEqual(prediction.apparent_brightness, ApparentBrightness.FAINT)
        self.assertEqual(prediction.looking_toward, LookingToward.NORTHERN_HORIZON)
        self.assertEqual(prediction.elevation_range, "5-15° above horizon")

    def test_new_york_at_kp_nine(self):
        prediction = predict_appearance(NEW_YORK, 9, config=self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.BELOW_OVAL_CLOSE)
        self.assertFalse(prediction.visibility.is_visible)

    def test_not_visible(self):
        prediction = predict_appearance(MIAMI, 5, config=self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.NOT_VISIBLE)
        self.assertEqual(prediction.looking_toward, LookingToward.NOT_VISIBLE)
        self.assertEqual(prediction.expected_colors, ())
        self.assertEqual(prediction.elevation_range, "N/A")
        self.assertEqual(prediction.camera_guidance.iso, "N/A")
        self.assertEqual(prediction.viewing_tip, "Check back when space weather conditions improve.")

    def test_southern_hemisphere_edge(self):
        prediction = predict_appearance(USHUAIA, 6, config=self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.UNDER_OVAL_EDGE)
        self.assertEqual(prediction.looking_toward, LookingToward.SOUTHERN_HORIZON)
        self.assertEqual(prediction.viewing_direction, "Look South")
        self.assertEqual(prediction.elevation_range, "45-60° above southern horizon")

    def test_southern_hemisphere_center(self):
        prediction = predict_appearance(USHUAIA, 7, config=self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.UNDER_OVAL_CENTER)
        self.assertIn("Southern Lights", prediction.summary)

    def test_impossible_sample_forces_not_visible(self):
        sample = SpaceWeatherSample(kp=8, bz=5, bt=10, speed=500, density=5)
        prediction = predict_appearance(TROMSO, 8, sample, self.config)
        self.assertEqual(prediction.scenario, ViewingScenario.NOT_VISIBLE)
        self.assertTrue(prediction.verdict.is_impossible)

    def test_verdict_attached(self):
        sample = SpaceWeatherSample(kp=5, bz=-8, bt=12, speed=550, density=8)
        prediction = predict_appearance(TROMSO, 5, sample, self.config)
        self.assertEqual(prediction.verdict.intensity_score, 62)

    def test_idempotent(self):
        self.assertEqual(
            predict_appearance(TROMSO, 4, config=self.config),
            predict_appearance(TROMSO, 4, config=self.config),
        )

    def test_invalid_inputs(self):
        with self.assertRaises(InputRangeError):
            predict_appearance(GeographicPoint(91.0, 0.0), 3, config=self.config)
        with self.assertRaises(InputRangeError):
            predict_appearance(TROMSO, -1, config=self.config)

    def test_to_dict_keys_are_camel_case(self):
        data = predict_appearance(TROMSO, 3, config=self.config).to_dict()
        for key in data:
            self.assertNotIn("_", key)
        self.assertIn("elevationAngle", data)
        self.assertIn("cameraSettings", data)
        self.assertIsNone(data["verdict"])


if __name__ == "__main__":
    unittest.main()

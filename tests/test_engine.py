"""
Unit tests for the engine facade.
"""

import unittest

from aurora_verdict import AuroraEngine, GeographicPoint, SpaceWeatherSample, __version__
from aurora_verdict.api.core.config import EngineConfig, clear_engine_config, set_engine_config
from aurora_verdict.api.core.constants import MagneticPole
from aurora_verdict.api.core.enums import QualityTier, ViewingScenario
from aurora_verdict.api.engine import clear_default_engine, get_default_engine
from aurora_verdict.api.reference.cities import load_reference_cities


class TestAuroraEngine(unittest.TestCase):
    """Test suite for AuroraEngine"""

    @classmethod
    def setUpClass(cls):
        cls.engine = AuroraEngine(EngineConfig(reference_cities=load_reference_cities()))

    def test_package_example(self):
        verdict = self.engine.calculate_verdict(SpaceWeatherSample(kp=5, bz=-8, bt=12, speed=550, density=8))
        self.assertEqual(verdict.intensity_score, 62)
        prediction = self.engine.predict_appearance(GeographicPoint(69.6, 18.9), kp=3)
        self.assertEqual(prediction.scenario, ViewingScenario.UNDER_OVAL_CENTER)

    def test_transform_and_describe(self):
        self.assertAlmostEqual(self.engine.to_geomagnetic(69.6, 18.9).latitude, 65.71, places=2)
        description = self.engine.describe_location(64.8, -147.7, 1)
        self.assertEqual(description.visibility.quality_tier, QualityTier.EXCELLENT)

    def test_oval_and_visibility(self):
        self.assertEqual(self.engine.oval_geometry(3).equatorward_edge, 59.5)
        self.assertTrue(self.engine.assess_visibility(62.0, 3).is_visible)

    def test_city_visibility_covers_all_cities(self):
        entries = self.engine.city_visibility(5)
        self.assertEqual(len(entries), 70)
        self.assertEqual(entries[0].city.name, "Tromsø, Norway")

    def test_visible_cities(self):
        visible = self.engine.visible_cities(9)
        names = [entry.city.name for entry in visible]
        self.assertIn("London, UK", names)
        self.assertNotIn("New York, USA", names)
        for entry in visible:
            self.assertTrue(entry.visibility.is_visible)

    def test_visible_cities_min_tier(self):
        good = self.engine.visible_cities(7, QualityTier.GOOD)
        self.assertTrue(good)
        for entry in good:
            self.assertGreaterEqual(entry.visibility.quality_tier.rank, QualityTier.GOOD.rank)
        self.assertLess(len(good), len(self.engine.visible_cities(7)))

    def test_pole_is_injected(self):
        """Moving the pole changes geomagnetic latitudes without touching algorithms"""
        moved = AuroraEngine(EngineConfig(pole=MagneticPole(80.0, -100.0, 2025, 2030)))
        self.assertNotEqual(moved.to_geomagnetic(69.6, 18.9), self.engine.to_geomagnetic(69.6, 18.9))

    def test_version(self):
        self.assertEqual(__version__, "0.1.0")


class TestDefaultEngine(unittest.TestCase):
    """Test suite for the shared default engine"""

    def setUp(self):
        clear_default_engine()
        clear_engine_config()

    def tearDown(self):
        clear_default_engine()
        clear_engine_config()

    def test_uses_cached_config(self):
        config = EngineConfig()
        set_engine_config(config)
        self.assertIs(get_default_engine().config, config)

    def test_shared_instance(self):
        self.assertIs(get_default_engine(), get_default_engine())


if __name__ == "__main__":
    unittest.main()

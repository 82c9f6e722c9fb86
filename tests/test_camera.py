"""
Unit tests for camera settings.
"""

import unittest

from aurora_verdict.api.appearance.camera import CAMERA_SETTINGS, camera_guidance
from aurora_verdict.api.core.enums import ApparentBrightness


class TestCameraGuidance(unittest.TestCase):
    """Test suite for camera_guidance"""

    def test_every_brightness_has_settings(self):
        for brightness in ApparentBrightness:
            with self.subTest(brightness=brightness):
                self.assertIn(brightness, CAMERA_SETTINGS)

    def test_brilliant(self):
        guidance = camera_guidance(ApparentBrightness.BRILLIANT)
        self.assertEqual(guidance.iso, "800-1600")
        self.assertEqual(guidance.shutter, "2-5 seconds")

    def test_not_visible(self):
        guidance = camera_guidance(ApparentBrightness.NOT_VISIBLE)
        self.assertEqual((guidance.iso, guidance.shutter, guidance.aperture), ("N/A", "N/A", "N/A"))

    def test_to_dict(self):
        self.assertEqual(
            set(camera_guidance(ApparentBrightness.FAINT).to_dict()),
            {"iso", "shutter", "aperture", "tip"},
        )


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the auroral oval model.
"""

import unittest

from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.geomagnetic.oval import AuroralOvalGeometry, oval_geometry


class TestOvalGeometry(unittest.TestCase):
    """Test suite for oval_geometry"""

    def test_quiet_oval(self):
        self.assertEqual(oval_geometry(0), AuroralOvalGeometry(67.0, 73.0, 78.0))

    def test_unsettled_oval(self):
        self.assertEqual(oval_geometry(3), AuroralOvalGeometry(59.5, 65.5, 70.5))

    def test_severe_storm_oval(self):
        self.assertEqual(oval_geometry(9), AuroralOvalGeometry(45.0, 51.0, 56.0))

    def test_bounds_and_ordering(self):
        """Edge, center and poleward edge stay ordered within 45-78 degrees"""
        for tenths in range(0, 91):
            kp = tenths / 10
            with self.subTest(kp=kp):
                oval = oval_geometry(kp)
                self.assertGreaterEqual(oval.equatorward_edge, 45.0)
                self.assertLessEqual(oval.equatorward_edge, oval.center_latitude)
                self.assertLessEqual(oval.center_latitude, oval.poleward_edge)
                self.assertLessEqual(oval.poleward_edge, 78.0)

    def test_expands_monotonically(self):
        """The equatorward edge never moves poleward as Kp rises"""
        edges = [oval_geometry(tenths / 10).equatorward_edge for tenths in range(0, 91)]
        self.assertEqual(edges, sorted(edges, reverse=True))

    def test_out_of_range_kp_rejected(self):
        for kp in (-1.0, 9.1, float("inf")):
            with self.subTest(kp=kp):
                with self.assertRaises(InputRangeError):
                    oval_geometry(kp)

    def test_to_dict_keys(self):
        self.assertEqual(
            oval_geometry(5).to_dict(),
            {"equatorwardEdge": 54.5, "centerLatitude": 60.5, "polewardEdge": 65.5},
        )


if __name__ == "__main__":
    unittest.main()

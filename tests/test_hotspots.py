"""
This module contains tests for the hotspot table.
"""
import unittest

import numpy as np

from pyhotspot.hotspots import HOTSPOTS, Hotspot


class TestHotspot(unittest.TestCase):
    def test_reference_table(self):
        self.assertEqual(len(HOTSPOTS), 5)
        revenants = HOTSPOTS[2]
        self.assertEqual(revenants.label, "Revenant Caves Entrance")
        self.assertEqual(revenants.center, (400, 400))
        self.assertEqual(revenants.radius, 90)
        for hotspot in HOTSPOTS:
            self.assertTrue(hotspot.description)

    def test_weights_do_not_need_to_sum_to_one(self):
        self.assertNotAlmostEqual(sum(h.weight for h in HOTSPOTS), 1.)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            Hotspot(100, 100, 0, 0.5, "zero radius")
        with self.assertRaises(ValueError):
            Hotspot(100, 100, 10, 0., "zero weight")
        with self.assertRaises(ValueError):
            Hotspot(100, 100, 10, 1.5, "heavy")
        with self.assertRaises(ValueError):
            Hotspot(900, 100, 10, 0.5, "off the map")

    def test_contains(self):
        hotspot = Hotspot(100, 100, 10, 0.5, "test")
        inside = hotspot.contains([[100, 100], [110, 100], [100, 111], [0, 0]])
        np.testing.assert_array_equal(inside, [True, True, False, False])

    def test_outline_uses_horizontal_scale_for_radius(self):
        hotspot = Hotspot(400, 400, 100, 0.5, "test")
        outline = hotspot.outline(0.5, 0.25)
        minx, miny, maxx, maxy = outline.bounds
        self.assertAlmostEqual((minx + maxx) / 2, 200.)
        self.assertAlmostEqual((miny + maxy) / 2, 100.)
        self.assertAlmostEqual(maxx - minx, 100., places=6)
        self.assertAlmostEqual(maxy - miny, 100., places=6)


if __name__ == '__main__':
    unittest.main()

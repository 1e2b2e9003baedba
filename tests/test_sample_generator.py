"""
This module contains tests for synthetic sample generation.
"""
import unittest

import numpy as np

from pyhotspot.constants import DOMAIN_SIZE, HOTSPOT_PROBABILITY
from pyhotspot.hotspots import HOTSPOTS, Hotspot
from pyhotspot.sample_generator import generate_samples, sample_disk


class TestGenerateSamples(unittest.TestCase):
    def test_count_and_bounds(self):
        for count in [0, 1, 7, 2000]:
            samples = generate_samples(count, rng=count)
            self.assertEqual(samples.shape, (count, 2))
            self.assertTrue(np.all(samples >= 0.))
            self.assertTrue(np.all(samples <= DOMAIN_SIZE))

    def test_default_count(self):
        self.assertEqual(len(generate_samples(rng=1)), 2000)

    def test_empty(self):
        samples = generate_samples(0)
        self.assertEqual(samples.shape, (0, 2))

    def test_invalid_count(self):
        with self.assertRaises(ValueError):
            generate_samples(-1)
        with self.assertRaises(ValueError):
            generate_samples(2.5)

    def test_samples_are_read_only(self):
        samples = generate_samples(10, rng=0)
        with self.assertRaises(ValueError):
            samples[0, 0] = 1.

    def test_unseeded_runs_differ(self):
        self.assertFalse(np.array_equal(generate_samples(100), generate_samples(100)))

    def test_seeded_runs_repeat(self):
        np.testing.assert_array_equal(generate_samples(100, rng=3), generate_samples(100, rng=3))

    def test_hotspot_shares(self):
        n = 100_000
        samples = generate_samples(n, rng=np.random.default_rng(42))
        for hotspot in HOTSPOTS:
            share = hotspot.contains(samples).mean()
            # the hotspots do not overlap, so only the uniform background adds to each disk
            expected = HOTSPOT_PROBABILITY / len(HOTSPOTS) \
                + (1 - HOTSPOT_PROBABILITY) * hotspot.area / DOMAIN_SIZE ** 2
            self.assertAlmostEqual(share, expected, delta=0.01, msg=hotspot.label)

    def test_uniform_background_share(self):
        n = 100_000
        samples = generate_samples(n, rng=7)
        in_any = np.zeros(n, dtype=bool)
        for hotspot in HOTSPOTS:
            in_any |= hotspot.contains(samples)
        hotspot_area = sum(h.area for h in HOTSPOTS) / DOMAIN_SIZE ** 2
        expected_outside = (1 - HOTSPOT_PROBABILITY) * (1 - hotspot_area)
        self.assertAlmostEqual((~in_any).mean(), expected_outside, delta=0.01)

    def test_without_hotspots_everything_is_uniform(self):
        samples = generate_samples(20_000, hotspots=[], rng=5)
        self.assertEqual(samples.shape, (20_000, 2))
        self.assertAlmostEqual(samples[:, 0].mean(), DOMAIN_SIZE / 2, delta=10.)
        self.assertAlmostEqual(samples[:, 1].mean(), DOMAIN_SIZE / 2, delta=10.)

    def test_edge_hotspot_is_clamped(self):
        corner = Hotspot(0, 0, 200, 1., "corner")
        samples = generate_samples(5000, hotspots=[corner], rng=11)
        self.assertTrue(np.all(samples >= 0.))
        # clamping piles points onto both axes
        self.assertGreater(np.sum(samples[:, 0] == 0.), 0)
        self.assertGreater(np.sum(samples[:, 1] == 0.), 0)


class TestSampleDisk(unittest.TestCase):
    def test_points_inside_disk(self):
        hotspot = HOTSPOTS[4]
        points = sample_disk(hotspot, 5000, rng=0)
        self.assertEqual(points.shape, (5000, 2))
        self.assertTrue(np.all(hotspot.contains(points)))

    def test_area_uniform_density(self):
        hotspot = HOTSPOTS[0]
        n = 50_000
        points = sample_disk(hotspot, n, rng=np.random.default_rng(2024))
        r = np.hypot(points[:, 0] - hotspot.x, points[:, 1] - hotspot.y)
        fraction = (r / hotspot.radius) ** 2
        counts, _ = np.histogram(fraction, bins=10, range=(0., 1.))
        np.testing.assert_allclose(counts / n, 0.1, atol=0.01)

    def test_inner_half_radius_holds_a_quarter(self):
        hotspot = HOTSPOTS[2]
        points = sample_disk(hotspot, 40_000, rng=9)
        r = np.hypot(points[:, 0] - hotspot.x, points[:, 1] - hotspot.y)
        self.assertAlmostEqual(np.mean(r <= hotspot.radius / 2), 0.25, delta=0.01)


if __name__ == '__main__':
    unittest.main()

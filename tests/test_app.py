"""
This module contains tests for the map window and the headless export.
"""
import os
import tempfile
import unittest
from types import SimpleNamespace

from tests.helpers import StaticLoader, make_image

import matplotlib.image as mpimg
import matplotlib.pyplot as pl

from pyhotspot.app import LOADING_MESSAGE, HotspotMapApp, export_map
from pyhotspot.controller import MapController
from pyhotspot.image_loader import ImageLoadFailure
from pyhotspot.renderer import RenderOutcome


class TestExportMap(unittest.TestCase):
    def test_export(self):
        controller = MapController(loader=StaticLoader(make_image(80, 40)), sample_count=100, rng=0)
        with tempfile.TemporaryDirectory() as tmp:
            fn = os.path.join(tmp, "map.png")
            outcome = export_map(fn, container_width=200, controller=controller)
            self.assertEqual(outcome, RenderOutcome.LOADED)
            pixels = mpimg.imread(fn)
            self.assertEqual(pixels.shape[:2], (100, 200))

    def test_export_failure_writes_fallback(self):
        loader = StaticLoader(error=ImageLoadFailure("u", "down"))
        controller = MapController(loader=loader, sample_count=10)
        with tempfile.TemporaryDirectory() as tmp:
            fn = os.path.join(tmp, "map.png")
            outcome = export_map(fn, controller=controller)
            self.assertEqual(outcome, RenderOutcome.FAILED)
            self.assertTrue(os.path.exists(fn))


class TestHotspotMapApp(unittest.TestCase):
    def setUp(self):
        self.loader = StaticLoader(make_image(80, 40))
        controller = MapController(loader=self.loader, sample_count=50, rng=0)
        self.app = HotspotMapApp(controller)
        self.app.build(figsize=(4, 4))

    def tearDown(self):
        pl.close(self.app.fig)

    def test_build_mounts_at_window_width(self):
        width = 4 * self.app.fig.dpi
        self.assertTrue(self.app.controller.map_loaded)
        self.assertEqual(self.app.controller.dimensions, (width, width / 2))
        self.assertEqual(len(self.app.ax.images), 1)

    def test_resize_event_rerenders(self):
        self.app._on_resize(SimpleNamespace(width=200))
        self.assertEqual(self.app.controller.dimensions, (200., 100.))
        self.assertEqual(self.app.controller.container_width, 200.)
        self.assertEqual(self.loader.calls, 2)
        self.assertEqual(self.app.ax.images[0].get_array().shape[:2], (100, 200))

    def test_zero_width_event_is_ignored(self):
        before = self.app.controller.dimensions
        generation = self.app.controller.generation
        self.app._on_resize(SimpleNamespace(width=0))
        self.assertEqual(self.app.controller.dimensions, before)
        self.assertEqual(self.app.controller.generation, generation)
        self.assertEqual(self.loader.calls, 1)

    def test_last_frame_stays_while_reloading(self):
        self.app.controller.begin_loading()
        self.assertFalse(self.app.controller.map_loaded)
        self.app._display()
        self.assertEqual(len(self.app.ax.images), 1)
        self.assertEqual(self.app.ax.texts, [])

    def test_loading_text_before_first_frame(self):
        app = HotspotMapApp(MapController(loader=StaticLoader(make_image())))
        app.fig, app.ax = pl.subplots()
        try:
            app._display()
            self.assertEqual([t.get_text() for t in app.ax.texts], [LOADING_MESSAGE])
            self.assertEqual(len(app.ax.images), 0)
        finally:
            pl.close(app.fig)


if __name__ == '__main__':
    unittest.main()

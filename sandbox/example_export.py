#!/usr/bin/env python
"""
Export Example

Renders the Wilderness hotspot map once and prints the per-hotspot summary.
"""

import logging

from pyhotspot import MapController, summarize_hotspots
from pyhotspot.app import export_map

logging.basicConfig(level=logging.INFO)

controller = MapController()
outcome = export_map('img/example_export.png', container_width=800, controller=controller)
print(f"Render outcome: {outcome}")

for summary in summarize_hotspots(controller.samples):
    print(f"{summary.label:35s} {summary.count:5d} ({summary.share:.1%})")

"""
pyhotspot - Simulated death hotspot maps.

This package generates synthetic point clouds clustered around a fixed table
of hotspots and renders them, scaled to the available width, on top of a
background map image.
"""

from .hotspots import Hotspot, HOTSPOTS
from .sample_generator import generate_samples, sample_disk
from .image_loader import ImageLoader, ImageLoadFailure, MapImage
from .surface import Surface
from .renderer import (
    RenderOutcome,
    SurfaceDimensions,
    compute_surface_dimensions,
    scale_factors,
    to_pixel_coordinates,
    render,
    render_failure,
)
from .controller import MapController, RenderState
from .analysis import (
    HotspotSummary,
    summarize_hotspots,
    radial_histogram,
    radial_uniformity,
    export_json,
)

__version__ = "0.1.0"

__all__ = [
    # Data model
    "Hotspot",
    "HOTSPOTS",
    # Sampling
    "generate_samples",
    "sample_disk",
    # Image loading
    "ImageLoader",
    "ImageLoadFailure",
    "MapImage",
    # Rendering
    "Surface",
    "RenderOutcome",
    "SurfaceDimensions",
    "compute_surface_dimensions",
    "scale_factors",
    "to_pixel_coordinates",
    "render",
    "render_failure",
    # State
    "MapController",
    "RenderState",
    # Analysis
    "HotspotSummary",
    "summarize_hotspots",
    "radial_histogram",
    "radial_uniformity",
    "export_json",
]

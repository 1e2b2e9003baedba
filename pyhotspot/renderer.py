"""
Scaled rendering of samples and hotspots onto a surface.

The normalized map space is fixed at 800x800 whatever the pixel size of the
background image. Rendering always clears and repaints the whole surface;
there is no incremental update.
"""

from __future__ import annotations

import enum
import logging
from typing import NamedTuple, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyhotspot.constants import (
    DOMAIN_SIZE,
    SAMPLE_RADIUS_PX,
    SAMPLE_COLOR,
    HOTSPOT_EDGE_COLOR,
    HOTSPOT_LINE_WIDTH_PX,
    FALLBACK_MESSAGE,
    FALLBACK_COLOR,
    FALLBACK_FONT_SIZE_PX,
    FALLBACK_POSITION,
)
from pyhotspot.hotspots import HOTSPOTS, Hotspot
from pyhotspot.image_loader import MapImage
from pyhotspot.surface import Surface

logger = logging.getLogger(__name__)


class RenderOutcome(enum.Enum):
    LOADED = "loaded"
    FAILED = "failed"


class SurfaceDimensions(NamedTuple):
    width: float
    height: float


def compute_surface_dimensions(
    natural_width: float,
    natural_height: float,
    container_width: float,
) -> SurfaceDimensions:
    """
    Size the surface to the container width, keeping the image aspect ratio.

    Raises
    ------
    ValueError
        If any of the inputs is not strictly positive.
    """
    if not (natural_width > 0 and natural_height > 0):
        raise ValueError(f"Image size must be positive, got {natural_width}x{natural_height}")
    if not container_width > 0:
        raise ValueError(f"Container width must be positive, got {container_width}")
    aspect_ratio = natural_width / natural_height
    width = float(container_width)
    return SurfaceDimensions(width, width / aspect_ratio)


def scale_factors(dimensions: SurfaceDimensions) -> tuple[float, float]:
    """Per-axis factors from normalized map units to surface pixels."""
    return dimensions.width / DOMAIN_SIZE, dimensions.height / DOMAIN_SIZE


def to_pixel_coordinates(
    samples: ArrayLike,
    dimensions: SurfaceDimensions,
) -> NDArray[np.floating]:
    """
    Map normalized (n, 2) coordinates into surface pixel space.

    Examples
    --------
    >>> to_pixel_coordinates([[800, 800], [0, 0]], SurfaceDimensions(400, 400))
    array([[400., 400.],
           [  0.,   0.]])
    """
    scale_x, scale_y = scale_factors(dimensions)
    points = np.asarray(samples, dtype=float).reshape(-1, 2)
    return points * np.array([scale_x, scale_y])


def render_failure(surface: Surface, message: str = FALLBACK_MESSAGE) -> RenderOutcome:
    """
    Replace the surface content with a diagnostic message.

    The surface keeps whatever size it currently has.
    """
    surface.clear()
    surface.fill_text(message, *FALLBACK_POSITION, color=FALLBACK_COLOR, size=FALLBACK_FONT_SIZE_PX)
    return RenderOutcome.FAILED


def render(
    surface: Surface,
    image: MapImage | None,
    container_width: float,
    samples: ArrayLike,
    hotspots: Sequence[Hotspot] = HOTSPOTS,
) -> RenderOutcome:
    """
    Paint the background, the samples and the hotspot outlines.

    Parameters
    ----------
    surface : Surface
        Drawing target; resized and cleared in place.
    image : MapImage or None
        Loaded background. None means the load failed, in which case the
        fallback message is drawn instead.
    container_width : float
        Width available to the surface, in pixels.
    samples : array-like of shape (n, 2)
        Points in normalized map coordinates.
    hotspots : sequence of Hotspot, optional
        Hotspots to outline (default: the reference table).

    Returns
    -------
    RenderOutcome
        LOADED if the map was drawn, FAILED if the fallback was drawn.
    """
    if image is None:
        return render_failure(surface)

    dimensions = compute_surface_dimensions(image.natural_width, image.natural_height, container_width)
    surface.resize(*dimensions)
    surface.clear()
    surface.draw_image(image.pixels)

    scale_x, scale_y = scale_factors(dimensions)

    surface.fill_circles(to_pixel_coordinates(samples, dimensions), SAMPLE_RADIUS_PX, SAMPLE_COLOR)

    # radius follows the horizontal scale only
    for hotspot in hotspots:
        surface.stroke_circle(
            hotspot.outline(scale_x, scale_y),
            HOTSPOT_EDGE_COLOR,
            HOTSPOT_LINE_WIDTH_PX,
        )

    logger.info("Rendered %d samples on a %.0fx%.0f surface", len(np.asarray(samples).reshape(-1, 2)), *dimensions)
    return RenderOutcome.LOADED

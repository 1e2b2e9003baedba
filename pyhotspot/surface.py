"""
Raster drawing surface backed by a matplotlib figure.

The surface hides matplotlib's coordinate conventions: data coordinates equal
pixel coordinates, with the origin in the top-left corner and y growing
downwards, the way a browser canvas is addressed.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import EllipseCollection
from shapely.geometry import Polygon

from pyhotspot.constants import (
    DEFAULT_SURFACE_WIDTH,
    DEFAULT_SURFACE_HEIGHT,
    SURFACE_DPI,
)
from pyhotspot.tools import polygon_patch, px_to_pt, savefig_marginless


class Surface:
    """
    A pixel-addressable drawing target.

    Parameters
    ----------
    width : float, optional
        Initial width in pixels (default: 300).
    height : float, optional
        Initial height in pixels (default: 150).
    dpi : int, optional
        Resolution of the underlying figure (default: 100).

    Attributes
    ----------
    width, height : float
        Current size in pixels.
    figure : matplotlib.figure.Figure
        The figure everything is drawn onto.
    ax : matplotlib.axes.Axes
        Axes spanning the full figure in pixel coordinates.
    """

    def __init__(
        self,
        width: float = DEFAULT_SURFACE_WIDTH,
        height: float = DEFAULT_SURFACE_HEIGHT,
        dpi: int = SURFACE_DPI,
    ) -> None:
        self.dpi = dpi
        self.figure = Figure(dpi=dpi)
        self.canvas = FigureCanvasAgg(self.figure)
        self.ax = None
        self.resize(width, height)
        self.clear()

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        """Change the pixel size. Existing content is not rescaled."""
        if not (width > 0 and height > 0):
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self.figure.set_size_inches(self.width / self.dpi, self.height / self.dpi)
        if self.ax is not None:
            self._apply_limits()

    def _apply_limits(self) -> None:
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)

    def clear(self) -> None:
        """Erase everything, leaving a fully transparent surface."""
        self.figure.clear()
        self.figure.patch.set_alpha(0.)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self.ax.set_axis_off()
        self.ax.patch.set_visible(False)
        self._apply_limits()

    def draw_image(self, pixels: ArrayLike) -> None:
        """Draw a raster stretched to fill the whole surface."""
        self.ax.imshow(
            pixels,
            extent=(0, self.width, self.height, 0),
            aspect='auto',
            interpolation='bilinear',
        )
        self._apply_limits()

    def fill_circles(self, centers: ArrayLike, radius: float, color: Any) -> None:
        """
        Draw filled circles of one pixel radius and color.

        Parameters
        ----------
        centers : array-like of shape (n, 2)
            Circle centers in pixels.
        radius : float
            Circle radius in pixels.
        color : color-like
            Fill color, alpha included.
        """
        centers = np.asarray(centers, dtype=float).reshape(-1, 2)
        if len(centers) == 0:
            return
        diameters = np.full(len(centers), 2 * radius)
        circles = EllipseCollection(
            diameters,
            diameters,
            np.zeros(len(centers)),
            units='xy',
            offsets=centers,
            offset_transform=self.ax.transData,
            facecolors=[color],
            edgecolors='none',
        )
        self.ax.add_collection(circles)

    def stroke_circle(self, outline: Polygon, color: Any, linewidth: float) -> None:
        """Draw the unfilled outline of a polygon, line width in pixels."""
        patch = polygon_patch(
            outline,
            facecolor='none',
            edgecolor=color,
            linewidth=px_to_pt(linewidth, self.dpi),
        )
        self.ax.add_patch(patch)

    def fill_text(self, text: str, x: float, y: float, color: Any, size: float) -> None:
        """Draw text with its baseline starting at pixel (x, y)."""
        self.ax.text(
            x, y, text,
            color=color,
            fontsize=px_to_pt(size, self.dpi),
            family='sans-serif',
            ha='left',
            va='baseline',
        )

    def texts(self) -> list[str]:
        """Text strings currently drawn on the surface."""
        return [t.get_text() for t in self.ax.texts]

    def to_array(self) -> NDArray[np.uint8]:
        """Rasterize and return a copy of the RGBA pixel buffer."""
        self.canvas.draw()
        return np.asarray(self.canvas.buffer_rgba()).copy()

    def save(self, fn: str, **kwargs: Any) -> None:
        """Save the surface to an image file without margins."""
        savefig_marginless(fn, self.figure, self.ax, dpi=self.dpi, **kwargs)

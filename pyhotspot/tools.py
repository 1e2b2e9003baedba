"""
Small drawing and conversion helpers.

This module provides helper functions for:
- Converting shapely outlines to matplotlib patches
- Converting pixel sizes to typographic points
- Exporting figures without margins
- Turning coordinate arrays into JSON-serializable lists
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike
from matplotlib.figure import Figure
from matplotlib.axes import Axes
from matplotlib.path import Path
from matplotlib.patches import PathPatch
from matplotlib.ticker import NullLocator
from shapely.geometry import Polygon, MultiPolygon


def polygon_patch(
    polygon: Union[Polygon, MultiPolygon],
    **kwargs: Any
) -> PathPatch:
    """
    Create a matplotlib PathPatch from a shapely Polygon or MultiPolygon.

    Parameters
    ----------
    polygon : shapely.geometry.Polygon or shapely.geometry.MultiPolygon
        The outline to convert.
    **kwargs : dict
        Additional keyword arguments passed to matplotlib.patches.PathPatch
        (e.g., facecolor, edgecolor, linewidth).

    Returns
    -------
    matplotlib.patches.PathPatch
        A patch that can be added to an axes via ax.add_patch().

    Raises
    ------
    TypeError
        If polygon is not a Polygon or MultiPolygon.
    """
    def ring_to_codes(n):
        codes = [Path.LINETO] * n
        codes[0] = Path.MOVETO
        codes[-1] = Path.CLOSEPOLY
        return codes

    def polygon_to_path(poly):
        vertices = list(poly.exterior.coords)
        codes = ring_to_codes(len(vertices))
        for interior in poly.interiors:
            int_coords = list(interior.coords)
            vertices.extend(int_coords)
            codes.extend(ring_to_codes(len(int_coords)))
        return vertices, codes

    if isinstance(polygon, MultiPolygon):
        vertices = []
        codes = []
        for poly in polygon.geoms:
            v, c = polygon_to_path(poly)
            vertices.extend(v)
            codes.extend(c)
    elif isinstance(polygon, Polygon):
        vertices, codes = polygon_to_path(polygon)
    else:
        raise TypeError(f"Expected Polygon or MultiPolygon, got {type(polygon)}")

    return PathPatch(Path(vertices, codes), **kwargs)


def px_to_pt(px: float, dpi: float) -> float:
    """Convert a length in pixels to points at the given resolution."""
    return px * 72. / dpi


def savefig_marginless(fn: str, fig: Figure, ax: Axes, **kwargs: Any) -> None:
    """
    Save a figure with no margins or whitespace.

    Parameters
    ----------
    fn : str
        Output filename.
    fig : matplotlib.figure.Figure
        Figure to save.
    ax : matplotlib.axes.Axes
        Axes to configure.
    **kwargs : dict
        Additional arguments passed to fig.savefig().
    """
    ax.set_axis_off()
    ax.margins(0, 0)
    ax.xaxis.set_major_locator(NullLocator())
    ax.yaxis.set_major_locator(NullLocator())
    fig.savefig(fn, pad_inches=0, transparent=True, **kwargs)


def get_json(points: ArrayLike) -> list[list[float]]:
    """
    Convert an (n, 2) coordinate array to a list of [x, y] pairs.

    Parameters
    ----------
    points : array-like of shape (n, 2)

    Returns
    -------
    list of list
        Plain Python floats, safe for json.dumps.
    """
    return np.asarray(points, dtype=float).reshape(-1, 2).tolist()

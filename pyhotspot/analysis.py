"""
Summaries of a generated sample set.

Counts how many simulated deaths fall into each hotspot, checks that the
in-disk sampling is area-uniform, and exports everything as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from pyhotspot.constants import DOMAIN_SIZE
from pyhotspot.hotspots import HOTSPOTS, Hotspot
from pyhotspot.tools import get_json


@dataclass(frozen=True)
class HotspotSummary:
    """
    Sample statistics for one hotspot.
    """
    label: str
    description: str
    count: int
    share: float


def summarize_hotspots(
    samples: ArrayLike,
    hotspots: Sequence[Hotspot] = HOTSPOTS,
) -> list[HotspotSummary]:
    """
    Count the samples lying inside each hotspot's disk.

    Parameters
    ----------
    samples : array-like of shape (n, 2)
        Points in normalized map coordinates.
    hotspots : sequence of Hotspot, optional
        Hotspots to summarize (default: the reference table).

    Returns
    -------
    list of HotspotSummary
        One entry per hotspot, in table order. ``share`` is the count
        divided by the total number of samples (0 for an empty set).
    """
    samples = np.asarray(samples, dtype=float).reshape(-1, 2)
    total = len(samples)
    summaries = []
    for hotspot in hotspots:
        count = int(hotspot.contains(samples).sum())
        share = count / total if total > 0 else 0.
        summaries.append(HotspotSummary(hotspot.label, hotspot.description, count, share))
    return summaries


def radial_histogram(
    samples: ArrayLike,
    hotspot: Hotspot,
    bins: int = 10,
) -> NDArray[np.int_]:
    """
    Histogram of in-disk samples over the squared radial fraction.

    For points spread uniformly over the disk, (r / R)^2 is uniformly
    distributed on [0, 1], so every bin should hold about the same count.

    Parameters
    ----------
    samples : array-like of shape (n, 2)
    hotspot : Hotspot
    bins : int, optional
        Number of equal-width bins on [0, 1] (default: 10).

    Returns
    -------
    numpy.ndarray
        Integer counts per bin.
    """
    samples = np.asarray(samples, dtype=float).reshape(-1, 2)
    inside = samples[hotspot.contains(samples)]
    d2 = (inside[:, 0] - hotspot.x) ** 2 + (inside[:, 1] - hotspot.y) ** 2
    fraction = d2 / hotspot.radius ** 2
    counts, _ = np.histogram(fraction, bins=bins, range=(0., 1.))
    return counts


def radial_uniformity(
    samples: ArrayLike,
    hotspot: Hotspot,
    bins: int = 10,
) -> Any:
    """
    Chi-square test of the radial histogram against a flat one.

    Returns
    -------
    scipy.stats result
        With ``statistic`` and ``pvalue``. A tiny p-value means the points
        are not spread evenly over the disk area.

    Raises
    ------
    ValueError
        If no sample lies inside the hotspot.
    """
    counts = radial_histogram(samples, hotspot, bins)
    if counts.sum() == 0:
        raise ValueError(f"No samples inside hotspot '{hotspot.label}'")
    return stats.chisquare(counts)


def export_json(
    samples: ArrayLike,
    hotspots: Sequence[Hotspot] = HOTSPOTS,
    additional_data: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Export samples and hotspots to a JSON-serializable dictionary.

    Parameters
    ----------
    samples : array-like of shape (n, 2)
    hotspots : sequence of Hotspot, optional
    additional_data : dict, optional
        Extra entries merged into the export.

    Returns
    -------
    dict
        With keys 'domain', 'hotspots', 'samples' and 'summary'.
    """
    export = {
        'domain': {'x': (0., DOMAIN_SIZE), 'y': (0., DOMAIN_SIZE)},
        'hotspots': [
            {
                'x': float(h.x),
                'y': float(h.y),
                'radius': float(h.radius),
                'weight': float(h.weight),
                'label': h.label,
                'description': h.description,
            }
            for h in hotspots
        ],
        'samples': get_json(samples),
        'summary': [
            {'label': s.label, 'count': s.count, 'share': s.share}
            for s in summarize_hotspots(samples, hotspots)
        ],
    }

    if additional_data is not None:
        export.update(additional_data)

    return export

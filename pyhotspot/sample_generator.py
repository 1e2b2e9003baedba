"""
Synthetic death-location sampling.

Samples are drawn over the normalized 800x800 map space. Most of them fall
inside one of the hotspot disks, the rest are spread uniformly over the
whole map. The random source is unseeded by default, so two runs never
produce the same point cloud.
"""

from __future__ import annotations

import logging
import numbers
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from pyhotspot.constants import (
    DOMAIN_SIZE,
    GENERATOR_DEFAULT_COUNT,
    HOTSPOT_PROBABILITY,
)
from pyhotspot.hotspots import HOTSPOTS, Hotspot

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def _check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise ValueError(f"Sample count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"Sample count must be non-negative, got {count}")
    return int(count)


def _disk_offsets(
    radii: NDArray[np.floating],
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """
    Offsets uniformly distributed over disks of the given radii.

    Taking the square root of the uniform variate gives uniform area
    density; a plain uniform radius would pile points up at the center.
    """
    theta = rng.random(len(radii)) * 2 * np.pi
    r = radii * np.sqrt(rng.random(len(radii)))
    return r * np.cos(theta), r * np.sin(theta)


def sample_disk(
    hotspot: Hotspot,
    count: int,
    rng: RandomSource = None,
) -> NDArray[np.floating]:
    """
    Draw points uniformly distributed within a single hotspot's disk.

    Parameters
    ----------
    hotspot : Hotspot
        The disk to sample from.
    count : int
        Number of points.
    rng : numpy.random.Generator or int, optional
        Random source or seed. Unseeded if omitted.

    Returns
    -------
    numpy.ndarray
        Array of shape (count, 2). Not clamped to the map domain.
    """
    count = _check_count(count)
    rng = np.random.default_rng(rng)
    dx, dy = _disk_offsets(np.full(count, float(hotspot.radius)), rng)
    return np.column_stack((hotspot.x + dx, hotspot.y + dy))


def generate_samples(
    count: int = GENERATOR_DEFAULT_COUNT,
    hotspots: Sequence[Hotspot] = HOTSPOTS,
    rng: RandomSource = None,
) -> NDArray[np.floating]:
    """
    Generate simulated death locations biased toward hotspots.

    With probability 0.8 a draw picks one hotspot uniformly at random (the
    hotspot weight is not consulted) and samples a point inside its disk;
    otherwise x and y are drawn uniformly over the map. Both coordinates are
    clamped to [0, 800] afterwards.

    Parameters
    ----------
    count : int, optional
        Number of samples (default: 2000). Zero yields an empty array.
    hotspots : sequence of Hotspot, optional
        Hotspot table (default: the reference table). If empty, every
        draw uses the uniform branch.
    rng : numpy.random.Generator or int, optional
        Random source or seed. Unseeded if omitted.

    Returns
    -------
    numpy.ndarray
        Read-only float array of shape (count, 2) holding (x, y) rows.

    Raises
    ------
    ValueError
        If count is negative or not an integer.

    Examples
    --------
    >>> samples = generate_samples(5000)
    >>> samples.shape
    (5000, 2)
    """
    count = _check_count(count)
    rng = np.random.default_rng(rng)

    p = rng.random(count)
    if len(hotspots) > 0:
        near_hotspot = p < HOTSPOT_PROBABILITY
    else:
        near_hotspot = np.zeros(count, dtype=bool)

    centers = np.array([h.center for h in hotspots], dtype=float).reshape(-1, 2)
    radii = np.array([h.radius for h in hotspots], dtype=float)

    samples = rng.random((count, 2)) * DOMAIN_SIZE

    n_near = int(near_hotspot.sum())
    if n_near > 0:
        chosen = rng.integers(0, len(hotspots), size=n_near)
        dx, dy = _disk_offsets(radii[chosen], rng)
        samples[near_hotspot, 0] = centers[chosen, 0] + dx
        samples[near_hotspot, 1] = centers[chosen, 1] + dy

    np.clip(samples, 0., DOMAIN_SIZE, out=samples)
    samples.setflags(write=False)

    logger.info("Generated %d samples (%d near hotspots)", count, n_near)
    return samples

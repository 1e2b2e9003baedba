"""
Hotspot definitions.

A hotspot is a fixed circular region of the normalized 800x800 map space
around which simulated deaths cluster. The reference table below holds rough
estimates for the OSRS Wilderness and is for demonstration only.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray
from shapely.geometry import Point, Polygon

from pyhotspot.constants import DOMAIN_SIZE


@dataclass(frozen=True)
class Hotspot:
    """
    A circular region in normalized map coordinates.

    Parameters
    ----------
    x, y : float
        Center of the disk, both in [0, 800].
    radius : float
        Disk radius in normalized units, strictly positive.
    weight : float
        Relative likelihood in (0, 1]. Informational only: the sample
        generator picks hotspots uniformly.
    label : str
        Short display name.
    description : str, optional
        Free-text explanation of why deaths concentrate here.
    """
    x: float
    y: float
    radius: float
    weight: float
    label: str
    description: str = ''

    def __post_init__(self) -> None:
        if not (0. <= self.x <= DOMAIN_SIZE and 0. <= self.y <= DOMAIN_SIZE):
            raise ValueError(f"Hotspot center ({self.x}, {self.y}) lies outside the map domain")
        if not self.radius > 0:
            raise ValueError(f"Hotspot radius must be positive, got {self.radius}")
        if not 0. < self.weight <= 1.:
            raise ValueError(f"Hotspot weight must be in (0, 1], got {self.weight}")

    @property
    def center(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def area(self) -> float:
        return np.pi * self.radius ** 2

    def contains(self, points: ArrayLike) -> NDArray[np.bool_]:
        """
        Vectorized membership test for points of shape (n, 2).

        Points on the boundary count as inside.
        """
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        d2 = (points[:, 0] - self.x) ** 2 + (points[:, 1] - self.y) ** 2
        return d2 <= self.radius ** 2

    def outline(self, scale_x: float = 1., scale_y: float = 1., resolution: int = 64) -> Polygon:
        """
        Polygonal outline of the hotspot in scaled (pixel) coordinates.

        The center is scaled per axis but the radius only by ``scale_x``,
        so the outline stays circular even when the surface is not square.
        """
        center = Point(self.x * scale_x, self.y * scale_y)
        return center.buffer(self.radius * scale_x, resolution)


HOTSPOTS: tuple[Hotspot, ...] = (
    Hotspot(
        150, 700, 80, 0.4,
        "Edgeville Wilderness (Lvl 1-5)",
        "High death density due to accessibility, low-level PvP, "
        "and unprepared new adventurers.",
    ),
    Hotspot(
        650, 150, 70, 0.3,
        "Chaos Altar / Temple",
        "Concentrated deaths from prayer training vulnerability, "
        "attracting high-level PKers.",
    ),
    Hotspot(
        400, 400, 90, 0.5,
        "Revenant Caves Entrance",
        "Hotspot for high-value targets and intense multi-combat PvP, "
        "often leading to ambushes.",
    ),
    Hotspot(
        600, 550, 60, 0.25,
        "Wilderness Slayer/Lava Dragons",
        "Deaths from powerful monsters combined with unexpected player "
        "attacks during PvM.",
    ),
    Hotspot(
        400, 100, 100, 0.35,
        "Deep Wilderness Bosses",
        "Significant death concentrations in multi-combat zones, attracting "
        "solo adventurers and large PK teams due to high-value boss drops.",
    ),
)

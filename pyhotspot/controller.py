"""
Explicit owner of the map's UI state.

MapController keeps the loaded flag, the surface dimensions and the sample
collection together with the renderer lifecycle:

    IDLE -> LOADING -> LOADED | FAILED
    LOADED | FAILED -> LOADING

Every refresh takes a new generation number. When overlapping refreshes
complete out of order, only the most recent one is allowed to draw.
"""

from __future__ import annotations

import enum
import logging
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyhotspot.constants import DEFAULT_SAMPLE_COUNT, DOMAIN_SIZE
from pyhotspot.hotspots import HOTSPOTS, Hotspot
from pyhotspot.image_loader import ImageLoader, ImageLoadFailure, MapImage
from pyhotspot.renderer import RenderOutcome, SurfaceDimensions, render, render_failure
from pyhotspot.sample_generator import RandomSource, generate_samples
from pyhotspot.surface import Surface

logger = logging.getLogger(__name__)


class RenderState(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


_TRANSITIONS = {
    RenderState.IDLE: {RenderState.LOADING},
    RenderState.LOADING: {RenderState.LOADING, RenderState.LOADED, RenderState.FAILED},
    RenderState.LOADED: {RenderState.LOADING},
    RenderState.FAILED: {RenderState.LOADING},
}


class MapController:
    """
    Drives sample generation, image loading and rendering.

    Parameters
    ----------
    loader : ImageLoader, optional
        Source of the background image (default: the Wilderness map).
    surface : Surface, optional
        Drawing target (default: a new 300x150 surface).
    hotspots : sequence of Hotspot, optional
        Hotspot table used for sampling and outlines.
    sample_count : int, optional
        Number of samples generated on mount (default: 5000).
    rng : numpy.random.Generator or int, optional
        Random source for sample generation. Unseeded if omitted.

    Attributes
    ----------
    state : RenderState
        Current lifecycle state.
    dimensions : SurfaceDimensions
        Size of the surface after the last completed render.
    last_error : ImageLoadFailure or None
        Error of the last failed load, cleared by a successful one.

    Examples
    --------
    >>> controller = MapController()
    >>> asyncio.run(controller.mount(800))
    <RenderOutcome.LOADED: 'loaded'>
    >>> controller.map_loaded
    True
    """

    def __init__(
        self,
        loader: ImageLoader | None = None,
        surface: Surface | None = None,
        hotspots: Sequence[Hotspot] = HOTSPOTS,
        sample_count: int = DEFAULT_SAMPLE_COUNT,
        rng: RandomSource = None,
    ) -> None:
        self.loader = loader if loader is not None else ImageLoader()
        self.surface = surface if surface is not None else Surface()
        self.hotspots = tuple(hotspots)
        self.sample_count = sample_count
        self.rng = rng

        self.state = RenderState.IDLE
        self.dimensions = SurfaceDimensions(*self.surface.size)
        self.container_width: float | None = None
        self.last_error: ImageLoadFailure | None = None

        self._samples: NDArray[np.floating] | None = None
        self._generation = 0
        self._has_frame = False

    @property
    def map_loaded(self) -> bool:
        return self.state is RenderState.LOADED

    @property
    def samples(self) -> NDArray[np.floating]:
        if self._samples is None:
            return np.empty((0, 2))
        return self._samples

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def has_frame(self) -> bool:
        """True once any load has completed and drawn to the surface."""
        return self._has_frame

    def _transition(self, new_state: RenderState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"Invalid render state transition {self.state.name} -> {new_state.name}")
        logger.debug("Render state %s -> %s", self.state.name, new_state.name)
        self.state = new_state

    def begin_loading(self) -> int:
        """Enter LOADING and return the generation token of this load."""
        self._transition(RenderState.LOADING)
        self._generation += 1
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def complete_loaded(self, token: int, image: MapImage, container_width: float) -> RenderOutcome | None:
        """
        Finish a load by drawing the map.

        Returns None without drawing if a newer load has started since.
        """
        if not self.is_current(token):
            logger.debug("Discarding stale image load (generation %d, current %d)", token, self._generation)
            return None
        outcome = render(self.surface, image, container_width, self.samples, self.hotspots)
        self._transition(RenderState.LOADED)
        self.dimensions = SurfaceDimensions(*self.surface.size)
        self.last_error = None
        self._has_frame = True
        return outcome

    def complete_failed(self, token: int, error: ImageLoadFailure) -> RenderOutcome | None:
        """
        Finish a load by drawing the fallback message.

        Returns None without drawing if a newer load has started since.
        """
        if not self.is_current(token):
            logger.debug("Discarding stale image failure (generation %d, current %d)", token, self._generation)
            return None
        logger.error("Failed to load map image: %s", error)
        outcome = render_failure(self.surface)
        self._transition(RenderState.FAILED)
        self.last_error = error
        self._has_frame = True
        return outcome

    async def refresh(self, container_width: float | None = None) -> RenderOutcome | None:
        """
        Run the full pipeline: load the image, then render or fall back.

        Parameters
        ----------
        container_width : float, optional
            New container width. Defaults to the last one seen.

        Returns
        -------
        RenderOutcome or None
            None if this refresh was superseded before it completed.

        Raises
        ------
        ValueError
            If no positive container width is known.
        """
        if container_width is None:
            container_width = self.container_width
        if container_width is None or not container_width > 0:
            raise ValueError(f"Container width must be positive, got {container_width}")
        self.container_width = float(container_width)

        token = self.begin_loading()
        try:
            image = await self.loader.load()
        except ImageLoadFailure as exc:
            return self.complete_failed(token, exc)
        return self.complete_loaded(token, image, container_width)

    async def mount(self, container_width: float) -> RenderOutcome | None:
        """Generate the samples if not done yet and render the first frame."""
        if self._samples is None:
            self._samples = generate_samples(self.sample_count, self.hotspots, self.rng)
        return await self.refresh(container_width)

    async def resize(self, container_width: float) -> RenderOutcome | None:
        return await self.refresh(container_width)

    async def replace_samples(self, samples: ArrayLike) -> RenderOutcome | None:
        """
        Swap in a new sample collection and redraw.

        Nothing is drawn if the controller has not been mounted yet.

        Raises
        ------
        ValueError
            If samples are not (n, 2) or leave the map domain.
        """
        samples = np.array(samples, dtype=float)
        if samples.size == 0:
            samples = samples.reshape(0, 2)
        if samples.ndim != 2 or samples.shape[1] != 2:
            raise ValueError(f"Samples must have shape (n, 2), got {samples.shape}")
        if not np.all((samples >= 0) & (samples <= DOMAIN_SIZE)):
            raise ValueError("Samples must lie within the map domain")
        samples.setflags(write=False)
        self._samples = samples

        if self.container_width is None:
            return None
        return await self.refresh()

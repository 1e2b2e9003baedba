"""
Hosting shell for the hotspot map.

Shows the rendered surface in a pyplot window and redraws it whenever the
window is resized, or renders once headlessly and writes a PNG.
"""

from __future__ import annotations

import asyncio
import logging

import matplotlib.pyplot as pl

from pyhotspot.controller import MapController
from pyhotspot.renderer import RenderOutcome

logger = logging.getLogger(__name__)

LOADING_MESSAGE = 'Loading Wilderness map...'
TITLE = 'OSRS Wilderness Death Hotspot Analysis'


class HotspotMapApp:
    """
    Interactive window around a MapController.

    Parameters
    ----------
    controller : MapController, optional
        Controller to drive (default: a new one with the reference setup).
    """

    def __init__(self, controller: MapController | None = None) -> None:
        self.controller = controller if controller is not None else MapController()
        self.fig = None
        self.ax = None

    def _container_width(self) -> float:
        return self.fig.get_size_inches()[0] * self.fig.dpi

    def _display(self) -> None:
        self.ax.clear()
        self.ax.set_axis_off()
        # keep the last frame on screen while a reload is in flight
        if self.controller.has_frame:
            self.ax.imshow(self.controller.surface.to_array())
        else:
            self.ax.text(0.5, 0.5, LOADING_MESSAGE, ha='center', va='center', transform=self.ax.transAxes)
        self.fig.canvas.draw_idle()

    def _on_resize(self, event) -> None:
        if event.width <= 0:
            return
        asyncio.run(self.controller.resize(event.width))
        self._display()

    def build(self, figsize: tuple[float, float] = (8, 8)) -> None:
        """Create the window figure, render the first frame and subscribe to resizes."""
        self.fig, self.ax = pl.subplots(figsize=figsize)
        self.fig.canvas.manager.set_window_title(TITLE)
        self.fig.subplots_adjust(top=1, bottom=0, right=1, left=0)
        self._display()
        asyncio.run(self.controller.mount(self._container_width()))
        self._display()
        self.fig.canvas.mpl_connect('resize_event', self._on_resize)

    def show(self) -> None:
        """Open the window and block until it is closed."""
        self.build()
        pl.show()


def export_map(
    fn: str,
    container_width: float = 800.,
    controller: MapController | None = None,
) -> RenderOutcome | None:
    """
    Render the map once without a window and save it to an image file.

    The file is written on failure too, showing the fallback message.

    Parameters
    ----------
    fn : str
        Output filename.
    container_width : float, optional
        Surface width in pixels (default: 800).
    controller : MapController, optional
        Controller to use (default: a new one with the reference setup).

    Returns
    -------
    RenderOutcome
    """
    if controller is None:
        controller = MapController()
    outcome = asyncio.run(controller.mount(container_width))
    controller.surface.save(fn)
    logger.info("Saved map to %s (%s)", fn, outcome.value if outcome is not None else "superseded")
    return outcome


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    HotspotMapApp().show()

"""
Asynchronous loading of the background map raster.

The image fetch is the only I/O in the package and the only point where the
rendering pipeline suspends. Every way it can go wrong (transport error,
HTTP error status, undecodable payload) surfaces as ImageLoadFailure.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

import httpx
import numpy as np
from numpy.typing import NDArray
import matplotlib.image as mpimg

from pyhotspot.constants import WILDERNESS_MAP_URL

logger = logging.getLogger(__name__)


class ImageLoadFailure(Exception):
    """The background image could not be fetched or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to load image from {url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass(frozen=True)
class MapImage:
    """
    A decoded raster with its natural size.

    Attributes
    ----------
    pixels : numpy.ndarray
        Array of shape (height, width, channels) as returned by imread.
    url : str
        Where the image came from.
    """
    pixels: NDArray
    url: str = ''

    @property
    def natural_width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def natural_height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def aspect_ratio(self) -> float:
        return self.natural_width / self.natural_height


def to_color(pixels: NDArray) -> NDArray:
    """
    Expand grayscale (L) and grayscale-with-alpha (LA) rasters to RGB(A).

    imshow paints single-channel data through a colormap otherwise.
    """
    if pixels.ndim == 2:
        return np.dstack([pixels] * 3)
    channels = pixels.shape[2]
    if channels == 1:
        return np.dstack([pixels[..., 0]] * 3)
    if channels == 2:
        gray, alpha = pixels[..., 0], pixels[..., 1]
        return np.dstack((gray, gray, gray, alpha))
    return pixels


def decode_image(content: bytes, url: str = '') -> MapImage:
    """
    Decode raw image bytes into a MapImage.

    Raises
    ------
    ImageLoadFailure
        If the payload is empty or not a readable raster.
    """
    if not content:
        raise ImageLoadFailure(url, "empty response body")
    try:
        pixels = mpimg.imread(io.BytesIO(content))
    except (OSError, ValueError, SyntaxError) as exc:
        raise ImageLoadFailure(url, f"could not decode image ({exc})") from exc
    pixels = np.asarray(pixels)
    if pixels.ndim not in (2, 3) or pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise ImageLoadFailure(url, f"decoded image has unusable shape {pixels.shape}")
    return MapImage(pixels=to_color(pixels), url=url)


class ImageLoader:
    """
    Fetches the background map over HTTP(S).

    Parameters
    ----------
    url : str, optional
        Image location (default: the Wilderness map thumbnail).
    client : httpx.AsyncClient, optional
        Client to issue the request with. If None, a short-lived client
        is created for every fetch.
    use_cache : bool, optional
        Keep the last decoded image and reuse it on later loads
        (default: True).

    Examples
    --------
    >>> loader = ImageLoader()
    >>> image = asyncio.run(loader.load())
    >>> image.natural_width
    800
    """

    def __init__(
        self,
        url: str = WILDERNESS_MAP_URL,
        client: httpx.AsyncClient | None = None,
        use_cache: bool = True,
    ) -> None:
        self.url = url
        self.client = client
        self.use_cache = use_cache
        self._cached: MapImage | None = None

    def clear_cache(self) -> None:
        self._cached = None

    async def _fetch(self, client: httpx.AsyncClient) -> bytes:
        response = await client.get(self.url)
        response.raise_for_status()
        return response.content

    async def load(self) -> MapImage:
        """
        Fetch and decode the image.

        Returns
        -------
        MapImage

        Raises
        ------
        ImageLoadFailure
            On any network, HTTP status or decode error.
        """
        if self.use_cache and self._cached is not None:
            logger.debug("Using cached image for %s", self.url)
            return self._cached

        try:
            if self.client is not None:
                content = await self._fetch(self.client)
            else:
                async with httpx.AsyncClient(follow_redirects=True, timeout=None) as client:
                    content = await self._fetch(client)
        except httpx.HTTPError as exc:
            raise ImageLoadFailure(self.url, str(exc) or type(exc).__name__) from exc

        image = decode_image(content, self.url)
        logger.info("Loaded map image %s (%dx%d)", self.url, image.natural_width, image.natural_height)

        if self.use_cache:
            self._cached = image
        return image

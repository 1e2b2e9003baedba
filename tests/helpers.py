"""
Shared fixtures for the test suite.
"""
from __future__ import annotations
import io

import matplotlib
matplotlib.use("Agg")

import httpx
import numpy as np
import matplotlib.image as mpimg
from PIL import Image

from pyhotspot.image_loader import ImageLoader, MapImage


def make_pixels(width: int = 80, height: int = 60) -> np.ndarray:
    """
    A small deterministic RGB gradient.
    """
    x = np.linspace(0., 1., width)
    y = np.linspace(0., 1., height)
    xx, yy = np.meshgrid(x, y)
    return np.dstack((xx, yy, 0.5 * np.ones_like(xx))).astype(np.float32)


def make_image(width: int = 80, height: int = 60) -> MapImage:
    return MapImage(pixels=make_pixels(width, height), url="memory://map.png")


def png_bytes(width: int = 80, height: int = 60) -> bytes:
    buffer = io.BytesIO()
    mpimg.imsave(buffer, make_pixels(width, height), format="png")
    return buffer.getvalue()


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def serving_loader(content: bytes, status_code: int = 200) -> ImageLoader:
    """
    An ImageLoader whose requests are answered with a fixed response.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=content)

    return ImageLoader(url="https://example.org/map.png", client=mock_client(handler))


class StaticLoader:
    """
    Loader stand-in that returns a fixed image or raises a fixed error.
    """

    def __init__(self, image=None, error=None):
        self.image = image
        self.error = error
        self.calls = 0

    async def load(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.image


def gray_png_bytes(width: int = 40, height: int = 40, level: int = 128, alpha: int | None = None) -> bytes:
    """
    A flat grayscale PNG, L mode, or LA mode when alpha is given.
    """
    gray = np.full((height, width), level, dtype=np.uint8)
    if alpha is None:
        image = Image.fromarray(gray, mode="L")
    else:
        image = Image.fromarray(np.dstack((gray, np.full_like(gray, alpha))), mode="LA")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()

"""
components/image.py — obrazy na stronie.

WebPageImage  obraz śledzony przez LoadingTracker: pobranie bajtów + dekodowanie (Pillow)
Screenshot    zwykły obraz bez śledzenia ładowania
"""

from __future__ import annotations

import asyncio
import io

from bs4 import BeautifulSoup, Tag
from PIL import Image

from .base import Component
from .fetch import Fetcher
from .resource import ResourceComponent
from .types import ResourceState

IMAGE_CLASS = "web-link-image"
IMAGE_ERROR_TEXT = "Error loading image"


def image_style(size: int, padding: int, fixed_size: bool = False) -> str:
    if fixed_size:
        return f"width: {size}px; height: {size}px; padding: {padding}px"
    return f"max-width: {size}px; height: auto; padding: {padding}px"


def decode_image(data: bytes) -> tuple[int, int]:
    """Sprawdza, czy bajty są poprawnym obrazem; zwraca (szerokość, wysokość)."""
    with Image.open(io.BytesIO(data)) as img:
        size = img.size
        img.verify()
    return size


class WebPageImage(ResourceComponent):
    kind = "img"

    def __init__(
        self,
        src: str,
        alt: str = "",
        *,
        fetcher: Fetcher,
        size: int = 600,
        padding: int = 10,
        track_loading: bool = True,
        fixed_size: bool = False,
    ) -> None:
        super().__init__(src, fetcher=fetcher, track_loading=track_loading)
        self.alt        = alt
        self.size       = size
        self.padding    = padding
        self.fixed_size = fixed_size
        self.dimensions: tuple[int, int] | None = None

    @property
    def src(self) -> str:
        return self.source

    async def load(self) -> tuple[int, int]:
        data = await asyncio.to_thread(self.fetcher.get_bytes, self.src)
        return await asyncio.to_thread(decode_image, data)

    def apply(self, payload: tuple[int, int]) -> None:
        self.dimensions = payload

    def render(self, soup: BeautifulSoup) -> Tag:
        if self.state is ResourceState.FAILED:
            return soup.new_tag("span", attrs={"class": "image-error"}, string=IMAGE_ERROR_TEXT)
        return soup.new_tag("img", attrs={
            "src":   self.src,
            "alt":   self.alt,
            "class": IMAGE_CLASS,
            "style": image_style(self.size, self.padding, self.fixed_size),
        })


class Screenshot(Component):
    def __init__(self, src: str, alt: str = "", size: int = 600, padding: int = 10) -> None:
        self.src     = src
        self.alt     = alt
        self.size    = size
        self.padding = padding

    def render(self, soup: BeautifulSoup) -> Tag:
        return soup.new_tag("img", attrs={
            "src":   self.src,
            "alt":   self.alt,
            "class": IMAGE_CLASS,
            "style": image_style(self.size, self.padding),
        })

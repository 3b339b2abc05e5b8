"""
components/text_file.py — TextFileRenderer: pobiera {file_name}.txt i wstawia
jego zawartość jako fragment HTML do akapitu <p>.

Przy błędzie pobrania akapit zostaje pusty (diagnostyka trafia na konsolę błędów).
"""

from __future__ import annotations

import asyncio

from bs4 import BeautifulSoup, Tag

from .fetch import Fetcher
from .resource import ResourceComponent


class TextFileRenderer(ResourceComponent):
    kind = "txt"
    extension = ".txt"

    def __init__(
        self,
        file_name: str,
        *,
        fetcher: Fetcher,
        track_loading: bool = True,
    ) -> None:
        super().__init__(file_name, fetcher=fetcher, track_loading=track_loading)
        self.text = ""

    @property
    def path(self) -> str:
        return f"{self.source}{self.extension}"

    async def load(self) -> str:
        return await asyncio.to_thread(self.fetcher.get_text, self.path)

    def apply(self, payload: str) -> None:
        self.text = payload

    def render(self, soup: BeautifulSoup) -> Tag:
        el = soup.new_tag("p")
        if self.text:
            fragment = BeautifulSoup(self.text, "html.parser")
            for node in list(fragment.contents):
                el.append(node.extract())
        return el

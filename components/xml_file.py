"""components/xml_file.py — XMLFileRenderer: pobiera {file_name}.xml i wyświetla treść."""

from __future__ import annotations

import asyncio

from bs4 import BeautifulSoup, Tag

from data_model.nodes import DisplayNode
from xml_parser import parse_xml, render_nodes

from .fetch import Fetcher
from .resource import ResourceComponent
from .types import ResourceState

LOADING_TEXT = "Loading..."
ERROR_TEXT   = "Error loading content"


class XMLFileRenderer(ResourceComponent):
    kind = "xml"
    extension = ".xml"

    def __init__(
        self,
        file_name: str,
        *,
        fetcher: Fetcher,
        class_name: str | None = None,
        track_loading: bool = True,
    ) -> None:
        super().__init__(file_name, fetcher=fetcher, track_loading=track_loading)
        self.class_name = class_name
        self.nodes: list[DisplayNode] = []

    @property
    def path(self) -> str:
        return f"{self.source}{self.extension}"

    async def load(self) -> str:
        return await asyncio.to_thread(self.fetcher.get_text, self.path)

    def apply(self, payload: str) -> None:
        self.nodes = parse_xml(payload)

    def render(self, soup: BeautifulSoup) -> Tag:
        el = soup.new_tag("div")
        if self.class_name:
            el["class"] = self.class_name

        if self.state is ResourceState.LOADING:
            el.string = LOADING_TEXT
        elif self.state is ResourceState.FAILED:
            el.string = ERROR_TEXT
        else:
            for node in render_nodes(self.nodes, soup):
                el.append(node)
        return el

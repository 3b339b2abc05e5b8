"""
components/links.py — linki nawigacyjne.

WebLink  link z tekstem i/lub obrazkiem; walidacja parametrów w konstruktorze
NavBar   pasek nawigacji z listą tras
"""

from __future__ import annotations

from typing import Sequence

from bs4 import BeautifulSoup, Tag

from .base import Component
from .image import IMAGE_CLASS
from .types import ConfigurationError

_EXTERNAL_PREFIXES = ("http://", "https://", "//")


def is_external_link(link: str) -> bool:
    return link.startswith(_EXTERNAL_PREFIXES)


class WebLink(Component):
    """
    Link do strony wewnętrznej lub zewnętrznej.

    Wymagane: `link` oraz co najmniej jedno z `text` / `img`
    (inaczej ConfigurationError). Linki zewnętrzne otwierają się w nowej karcie.
    """

    def __init__(
        self,
        link: str,
        text: str | None = None,
        img: str | None = None,
        image_size: int = 200,
        font_size: int = 24,
    ) -> None:
        if not link:
            raise ConfigurationError("WebLink wymaga parametru 'link'")
        if not text and not img:
            raise ConfigurationError("WebLink wymaga parametru 'text' lub 'img'")

        self.link       = link
        self.text       = text or None
        self.img        = img or None
        self.image_size = image_size
        self.font_size  = font_size

    @property
    def external(self) -> bool:
        return is_external_link(self.link)

    def _image(self, soup: BeautifulSoup, alt: str) -> Tag:
        return soup.new_tag("img", attrs={
            "src":   self.img,
            "alt":   alt,
            "class": IMAGE_CLASS,
            "style": f"width: {self.image_size}px; height: {self.image_size}px",
        })

    def _content(self, soup: BeautifulSoup) -> Tag:
        if self.img and self.text:
            # obrazek nad tekstem
            box = soup.new_tag("div", attrs={
                "style": "display: flex; flex-direction: column; align-items: center",
            })
            box.append(self._image(soup, alt=self.text))
            box.append(soup.new_tag(
                "span",
                attrs={"style": f"font-size: {self.font_size}px; margin-top: 8px"},
                string=self.text,
            ))
            return box
        if self.img:
            return self._image(soup, alt="")
        return soup.new_tag(
            "span",
            attrs={"style": f"font-size: {self.font_size}px"},
            string=self.text,
        )

    def render(self, soup: BeautifulSoup) -> Tag:
        attrs = {"href": self.link, "class": "web-link"}
        if self.external:
            attrs["target"] = "_blank"
            attrs["rel"] = "noopener noreferrer"
        a = soup.new_tag("a", attrs=attrs)
        a.append(self._content(soup))
        return a


class NavBar(Component):
    """Pasek nawigacji; `routes` to pary (ścieżka, etykieta)."""

    def __init__(self, routes: Sequence[tuple[str, str]]) -> None:
        self.routes = list(routes)

    def render(self, soup: BeautifulSoup) -> Tag:
        nav = soup.new_tag("nav", attrs={"class": "navbar"})
        ul = soup.new_tag("ul")
        for path, label in self.routes:
            li = soup.new_tag("li")
            li.append(soup.new_tag("a", attrs={"href": path, "class": "nav-link"}, string=label))
            ul.append(li)
        nav.append(ul)
        return nav

"""
components/base.py — bazowy komponent i proste komponenty statyczne.

Cykl życia komponentu:
  mount(tracker)   — podpięcie pod rejestr ładowania (tracker może być None)
  render(soup)     — zbudowanie znacznika HTML (Tag BeautifulSoup)
  unmount()        — odpięcie; komponenty zasobów kończą tu swoją rejestrację

Rejestr (LoadingTracker) jest przekazywany jawnie w dół drzewa komponentów.
"""

from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup, Tag

from loading.tracker import LoadingTracker
from xml_parser.markup import new_soup, to_html


class Component:
    children: tuple[Component, ...] = ()

    def mount(self, tracker: LoadingTracker | None = None) -> None:
        for child in self.children:
            child.mount(tracker)

    def unmount(self) -> None:
        for child in self.children:
            child.unmount()

    def render(self, soup: BeautifulSoup) -> Tag:
        raise NotImplementedError

    def walk(self) -> Iterator[Component]:
        """Zwraca ten komponent i wszystkich potomków (pre-order)."""
        yield self
        for child in self.children:
            yield from child.walk()


class Container(Component):
    """Kontener HTML (domyślnie div) z listą dzieci."""

    def __init__(
        self,
        *children: Component,
        tag: str = "div",
        class_name: str | None = None,
    ) -> None:
        self.children   = tuple(children)
        self.tag        = tag
        self.class_name = class_name

    def render(self, soup: BeautifulSoup) -> Tag:
        el = soup.new_tag(self.tag)
        if self.class_name:
            el["class"] = self.class_name
        for child in self.children:
            el.append(child.render(soup))
        return el


class Heading(Component):
    def __init__(self, text: str, level: int = 1) -> None:
        self.text  = text
        self.level = level

    def render(self, soup: BeautifulSoup) -> Tag:
        return soup.new_tag(f"h{self.level}", string=self.text)


def render_html(component: Component) -> str:
    """Renderuje komponent do napisu HTML."""
    return to_html(component.render(new_soup()))

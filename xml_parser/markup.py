"""
xml_parser/markup.py — renderowanie drzewa DisplayNode do HTML (BeautifulSoup).

Publiczne API:
  render_nodes(nodes, soup) -> list[Tag | NavigableString]
  to_html(node)             -> str
  nodes_to_html(nodes)      -> str
"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from data_model.nodes import DisplayNode, Element, Text


class SourceOrderFormatter(HTMLFormatter):
    """Formatter "minimal", ale atrybuty w kolejności wstawienia (bs4 domyślnie je sortuje)."""

    def attributes(self, tag: Tag):
        return list(tag.attrs.items())


HTML_FORMATTER = SourceOrderFormatter(entity_substitution=EntitySubstitution.substitute_xml)


def new_soup() -> BeautifulSoup:
    return BeautifulSoup("", "html.parser")


def _render_element(el: Element, soup: BeautifulSoup) -> Tag:
    # atrybuty w kolejności źródłowej; href linku trafia tu także pusty
    tag = soup.new_tag(el.tag, attrs=dict(el.attributes))
    for child in render_nodes(el.children, soup):
        tag.append(child)
    return tag


def render_nodes(
    nodes: list[DisplayNode] | tuple[DisplayNode, ...],
    soup: BeautifulSoup,
) -> list[Tag | NavigableString]:
    """Zamienia węzły na elementy BeautifulSoup (bez dołączania do drzewa)."""
    out: list[Tag | NavigableString] = []
    for node in nodes:
        if isinstance(node, Text):
            out.append(NavigableString(node.value))
        else:
            out.append(_render_element(node, soup))
    return out


def to_html(node: PageElement) -> str:
    """Serializuje element (lub cały dokument) z zachowaniem kolejności atrybutów."""
    if isinstance(node, NavigableString):
        return node.output_ready(HTML_FORMATTER)
    return node.decode(formatter=HTML_FORMATTER)


def nodes_to_html(nodes: list[DisplayNode] | tuple[DisplayNode, ...]) -> str:
    """Zwraca HTML dla listy węzłów (bez elementu opakowującego)."""
    soup = new_soup()
    return "".join(to_html(n) for n in render_nodes(nodes, soup))

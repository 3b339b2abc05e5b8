"""
data_model — drzewo węzłów treści strony (DisplayNode).

Użycie:
  from data_model import Element, ElementKind, Text, DisplayNode, ...

Moduły:
  nodes — Text, Element, ElementKind, DisplayNode, kind_for_tag,
          resolve_heading_level, iter_text, text_content

Mapowanie tagów XML → HTML:
  paragraph | p        → <p>
  bold | b             → <strong>
  italic | i           → <em>
  break | br           → <br>          (zawsze bez dzieci)
  heading[level]       → <h1>..<h6>    (poza 1..6 lub brak → <h2>)
  list[type]           → <ol> dla type="ordered", inaczej <ul>
  item                 → <li>
  link[href]           → <a href=...>
  pozostałe            → <span>        (atrybuty i dzieci zachowane)
"""

from .nodes import (
    DEFAULT_HEADING_LEVEL,
    TAG_KINDS,
    DisplayNode,
    Element,
    ElementKind,
    Text,
    iter_text,
    kind_for_tag,
    resolve_heading_level,
    text_content,
)

__all__ = [
    "DEFAULT_HEADING_LEVEL",
    "TAG_KINDS",
    "DisplayNode",
    "Element",
    "ElementKind",
    "Text",
    "iter_text",
    "kind_for_tag",
    "resolve_heading_level",
    "text_content",
]

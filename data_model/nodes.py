"""
data_model/nodes.py — węzły wyświetlania (Display Node) zwracane przez konwerter XML.

DisplayNode to unia:
  Text     — liść z surowym tekstem (bez trimowania)
  Element  — węzeł z rodzajem (ElementKind), atrybutami i dziećmi

Mapowanie rodzaju na tag HTML (Element.tag):
  paragraph → p        bold   → strong     italic → em
  break     → br       heading → h{level}  list   → ol / ul
  item      → li       link   → a          unknown → span
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, TypeAlias

# ---------------------------------------------------------------------------
# Rodzaje elementów
# ---------------------------------------------------------------------------

DEFAULT_HEADING_LEVEL = 2
_HEADING_LEVELS = range(1, 7)


class ElementKind(StrEnum):
    """Zamknięty zbiór rodzajów elementów; UNKNOWN = przezroczysty kontener."""

    PARAGRAPH = "paragraph"
    BOLD      = "bold"
    ITALIC    = "italic"
    BREAK     = "break"
    HEADING   = "heading"
    LIST      = "list"
    ITEM      = "item"
    LINK      = "link"
    UNKNOWN   = "unknown"


# Nazwa tagu XML (lowercase) → rodzaj elementu
TAG_KINDS: dict[str, ElementKind] = {
    "paragraph": ElementKind.PARAGRAPH,
    "p":         ElementKind.PARAGRAPH,
    "bold":      ElementKind.BOLD,
    "b":         ElementKind.BOLD,
    "italic":    ElementKind.ITALIC,
    "i":         ElementKind.ITALIC,
    "break":     ElementKind.BREAK,
    "br":        ElementKind.BREAK,
    "heading":   ElementKind.HEADING,
    "list":      ElementKind.LIST,
    "item":      ElementKind.ITEM,
    "link":      ElementKind.LINK,
}


def kind_for_tag(tag_name: str) -> ElementKind:
    """Zwraca rodzaj elementu dla nazwy tagu (bez rozróżniania wielkości liter)."""
    return TAG_KINDS.get(tag_name.lower(), ElementKind.UNKNOWN)


def resolve_heading_level(raw: str | None) -> int:
    """
    Wylicza poziom nagłówka z atrybutu `level`.

    Brak atrybutu, wartość nieliczbowa lub spoza 1..6 → DEFAULT_HEADING_LEVEL.
    """
    if raw is None:
        return DEFAULT_HEADING_LEVEL
    try:
        level = int(raw.strip())
    except ValueError:
        return DEFAULT_HEADING_LEVEL
    return level if level in _HEADING_LEVELS else DEFAULT_HEADING_LEVEL


# ---------------------------------------------------------------------------
# Węzły
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Text:
    """Liść tekstowy; `value` jest zachowane dosłownie."""
    value: str


@dataclass(frozen=True, slots=True)
class Element:
    """
    Element drzewa wyświetlania.

    - kind:       rodzaj elementu (ElementKind)
    - attributes: atrybuty XML w kolejności źródłowej, wartości zawsze str;
                  tylko do odczytu. HEADING ma zawsze `level` z zakresu 1..6
    - children:   dzieci w kolejności dokumentu (BREAK zawsze bez dzieci)
    - source_tag: oryginalna nazwa tagu XML (przydatna dla UNKNOWN)
    """
    kind: ElementKind
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[DisplayNode, ...] = ()
    source_tag: str = ""

    def __post_init__(self) -> None:
        attrs = dict(self.attributes)
        if self.kind is ElementKind.HEADING:
            attrs["level"] = str(resolve_heading_level(attrs.get("level")))
        object.__setattr__(self, "attributes", MappingProxyType(attrs))
        if self.kind is ElementKind.BREAK and self.children:
            object.__setattr__(self, "children", ())

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.attributes.items()), self.children, self.source_tag))

    @property
    def level(self) -> int | None:
        """Poziom nagłówka 1..6 (None dla elementów innych niż HEADING)."""
        if self.kind is not ElementKind.HEADING:
            return None
        return resolve_heading_level(self.attributes.get("level"))

    @property
    def ordered(self) -> bool:
        return self.kind is ElementKind.LIST and self.attributes.get("type") == "ordered"

    @property
    def href(self) -> str | None:
        return self.attributes.get("href")

    @property
    def tag(self) -> str:
        """Tag HTML, którym element jest renderowany."""
        match self.kind:
            case ElementKind.PARAGRAPH:
                return "p"
            case ElementKind.BOLD:
                return "strong"
            case ElementKind.ITALIC:
                return "em"
            case ElementKind.BREAK:
                return "br"
            case ElementKind.HEADING:
                return f"h{self.level}"
            case ElementKind.LIST:
                return "ol" if self.ordered else "ul"
            case ElementKind.ITEM:
                return "li"
            case ElementKind.LINK:
                return "a"
            case ElementKind.UNKNOWN:
                return "span"


# Węzeł drzewa wyświetlania.
DisplayNode: TypeAlias = Text | Element


def iter_text(nodes: tuple[DisplayNode, ...] | list[DisplayNode]):
    """Zwraca wartości wszystkich liści Text w kolejności dokumentu."""
    for node in nodes:
        if isinstance(node, Text):
            yield node.value
        else:
            yield from iter_text(node.children)


def text_content(nodes: tuple[DisplayNode, ...] | list[DisplayNode]) -> str:
    return "".join(iter_text(nodes))

"""xml_parser/parser.py — konwersja dokumentu XML treści strony do drzewa DisplayNode."""

from __future__ import annotations

from dataclasses import dataclass, field

from lxml import etree
from rich.console import Console
from rich.markup import escape

from data_model.nodes import DisplayNode, Element, ElementKind, Text, kind_for_tag

err_console = Console(stderr=True)

# Parser ścisły: bez pobierania z sieci i bez rozwijania encji zewnętrznych.
# CDATA jest scalane z tekstem (strip_cdata=True).
_PARSER_OPTIONS = dict(
    resolve_entities=False,
    no_network=True,
    remove_comments=False,
    recover=False,
)

_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


@dataclass(slots=True)
class ParseResult:
    """
    Wynik parsowania.

    - nodes: dzieci elementu głównego po konwersji (puste przy błędzie)
    - error: komunikat błędu parsera; None gdy dokument był poprawny
    """
    nodes: list[DisplayNode] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Konwersja węzłów
# ---------------------------------------------------------------------------

def _text_node(text: str | None) -> Text | None:
    """Tekst złożony wyłącznie z białych znaków jest odrzucany; reszta bez zmian."""
    if text is None or not text.strip():
        return None
    return Text(text)


def _convert_children(el: etree._Element) -> list[DisplayNode]:
    """
    Konwertuje zawartość elementu w kolejności dokumentu:
    el.text, potem każde dziecko i jego tail.
    """
    out: list[DisplayNode] = []

    leading = _text_node(el.text)
    if leading is not None:
        out.append(leading)

    for child in el:
        # komentarze i instrukcje przetwarzania pomijamy, ale nie ich tail
        if isinstance(child.tag, str):
            out.append(_convert_element(child))
        tail = _text_node(child.tail)
        if tail is not None:
            out.append(tail)

    return out


def _attribute_name(el: etree._Element, key: str) -> str:
    """Klucz lxml `{uri}nazwa` → nazwa z prefiksem, jak w źródle (np. xml:lang)."""
    if not key.startswith("{"):
        return key
    qname = etree.QName(key)
    if qname.namespace == _XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in el.nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _namespace_declarations(el: etree._Element) -> dict[str, str]:
    """Deklaracje xmlns zapisane na tym elemencie (lxml trzyma je poza attrib)."""
    parent = el.getparent()
    inherited = parent.nsmap if parent is not None else {}
    return {
        (f"xmlns:{prefix}" if prefix else "xmlns"): uri
        for prefix, uri in el.nsmap.items()
        if inherited.get(prefix) != uri
    }


def _convert_element(el: etree._Element) -> Element:
    tag_name = etree.QName(el).localname
    attributes = _namespace_declarations(el)
    for k, v in el.attrib.items():
        attributes[_attribute_name(el, str(k))] = str(v)
    kind = kind_for_tag(tag_name)
    children = () if kind is ElementKind.BREAK else tuple(_convert_children(el))
    return Element(
        kind=kind,
        attributes=attributes,
        children=children,
        source_tag=tag_name,
    )


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_xml_result(xml_text: str) -> ParseResult:
    """
    Parsuje dokument XML i zwraca ParseResult.

    Element główny (zwyczajowo <content>) jest pomijany — wynikiem są jego
    bezpośrednie dzieci. Błąd parsowania nie jest rzucany: trafia do
    ParseResult.error i na konsolę błędów.
    """
    # tekst jest już zdekodowany: deklaracja encoding= w prologu jest ignorowana
    parser = etree.XMLParser(encoding="utf-8", **_PARSER_OPTIONS)
    try:
        # bytes, bo lxml odrzuca str z deklaracją kodowania
        root = etree.fromstring(xml_text.encode("utf-8"), parser)
    except (etree.LxmlError, ValueError) as e:
        message = str(e) or type(e).__name__
        err_console.print(f"[red]Błąd parsowania XML:[/red] {escape(message)}")
        return ParseResult(error=message)

    return ParseResult(nodes=_convert_children(root))


def parse_xml(xml_text: str) -> list[DisplayNode]:
    """Parsuje dokument XML do listy DisplayNode; przy błędzie zwraca []."""
    return parse_xml_result(xml_text).nodes

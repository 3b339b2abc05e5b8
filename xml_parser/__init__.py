"""
xml_parser — konwersja treści strony z XML do drzewa DisplayNode i do HTML.

Publiczne API:
  parse_xml(xml_text)          -> list[DisplayNode]   ([] przy błędzie)
  parse_xml_result(xml_text)   -> ParseResult         (węzły + komunikat błędu)
  render_nodes(nodes, soup)    -> list[Tag | NavigableString]
  to_html(node)                -> str                 (atrybuty w kolejności wstawienia)
  nodes_to_html(nodes)         -> str
"""

from .parser import ParseResult, parse_xml, parse_xml_result
from .markup import HTML_FORMATTER, new_soup, nodes_to_html, render_nodes, to_html

__all__ = [
    "ParseResult",
    "parse_xml",
    "parse_xml_result",
    "new_soup",
    "nodes_to_html",
    "render_nodes",
    "to_html",
    "HTML_FORMATTER",
]

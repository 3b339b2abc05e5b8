"""Komenda: psite parse — konwersja lokalnego pliku XML do drzewa DisplayNode."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from data_model.nodes import DisplayNode, Element, Text
from xml_parser import nodes_to_html, parse_xml_result

console = Console()


# ---------------------------------------------------------------------------
# Wyświetlanie drzewa
# ---------------------------------------------------------------------------

def _label(node: DisplayNode) -> str:
    if isinstance(node, Text):
        return f"[green]{escape(repr(node.value))}[/green]"
    attrs = " ".join(f"{k}={v!r}" for k, v in node.attributes.items())
    label = f"[bold cyan]{node.tag}[/bold cyan] [dim]{node.kind}"
    if node.source_tag and node.source_tag.lower() != node.kind:
        label += f" <{escape(node.source_tag)}>"
    label += "[/dim]"
    if attrs:
        label += f"  {escape(attrs)}"
    return label


def _add_nodes(tree: Tree, nodes: tuple[DisplayNode, ...] | list[DisplayNode]) -> None:
    for node in nodes:
        branch = tree.add(_label(node))
        if isinstance(node, Element):
            _add_nodes(branch, node.children)


def build_tree(title: str, nodes: list[DisplayNode]) -> Tree:
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    _add_nodes(tree, nodes)
    return tree


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    xml_path = Path(args.xml_file)
    if not xml_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {xml_path}")
        raise SystemExit(1)

    try:
        xml_text = xml_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {escape(str(e))}")
        raise SystemExit(1)

    result = parse_xml_result(xml_text)
    if not result.ok:
        raise SystemExit(1)

    if args.html:
        console.print(nodes_to_html(result.nodes), markup=False, highlight=False, soft_wrap=True)
        return

    console.print(build_tree(str(xml_path), result.nodes))
    console.print(f"  [dim]{len(result.nodes)} węzłów najwyższego poziomu[/dim]")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Konwertuje plik XML treści do drzewa węzłów (lub HTML).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje plik XML treści strony (<content>...</content>) i wyświetla drzewo
węzłów DisplayNode albo wynikowy HTML.

Przykłady:
  psite parse public/content/Home/AboutMe.xml
  psite parse public/content/Purger/P_Content.xml --html
        """,
    )
    p.add_argument(
        "xml_file",
        metavar="PLIK.xml",
        help="Ścieżka do pliku XML.",
    )
    p.add_argument(
        "--html",
        action="store_true",
        help="Wypisz HTML zamiast drzewa węzłów.",
    )
    p.set_defaults(func=run)

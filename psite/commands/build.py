"""Komenda: psite build — renderuje wszystkie strony portfolio do katalogu."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from pages import PAGES
from psite._config import add_source_arguments, settings_from_args
from psite.commands.render import render_to_file

console = Console()


def run(args: argparse.Namespace) -> None:
    try:
        settings = settings_from_args(args)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    out_dir = Path(args.out_dir)
    console.print(f"Budowanie [bold]{len(PAGES)}[/bold] stron do [cyan]{out_dir}[/cyan] …")

    for page in PAGES:
        render_to_file(page, settings, out_dir / f"{page.slug}.html")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Renderuje wszystkie strony do katalogu wyjściowego.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Renderuje każdą stronę z katalogu stron do pliku <slug>.html.

Przykłady:
  psite build --public-dir public
  psite build --out-dir dist --min-loading-time 0
        """,
    )
    p.add_argument(
        "--out-dir",
        metavar="KATALOG",
        default="dist",
        help="Katalog wyjściowy (domyślnie: dist).",
    )
    add_source_arguments(p)
    p.set_defaults(func=run)

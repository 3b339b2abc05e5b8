"""Komenda: psite pages — lista stron portfolio i zasobów, na które czekają."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from components import HttpFetcher, ResourceComponent, Screenshot, WebPageImage
from pages import PAGES

console = Console()


def run(args: argparse.Namespace) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("TRASA",   no_wrap=True, style="bold cyan")
    table.add_column("ETYKIETA", no_wrap=True)
    table.add_column("ŚLEDZONE", justify="right", no_wrap=True)
    table.add_column("OBRAZY",  justify="right", no_wrap=True)
    table.add_column("ZASOBY",  no_wrap=False, max_width=60)

    # fetcher tylko do zbudowania drzewa; nic nie jest pobierane
    fetcher = HttpFetcher("http://localhost")
    for page in PAGES:
        components = [c for root in page.build(fetcher) for c in root.walk()]
        tracked = [c for c in components if isinstance(c, ResourceComponent) and c.track_loading]
        images = [c for c in components if isinstance(c, (WebPageImage, Screenshot))]
        table.add_row(
            page.route,
            page.label,
            str(len(tracked)),
            str(len(images)),
            "\n".join(c.source for c in tracked) or "-",
        )
    fetcher.close()

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(PAGES)} stron[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "pages",
        help="Listuje strony portfolio i ich zasoby.",
    )
    p.set_defaults(func=run)

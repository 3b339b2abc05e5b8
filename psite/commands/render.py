"""Komenda: psite render — renderuje jedną stronę portfolio do pliku HTML."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from pages import PageSpec, find_page, render_page
from psite._config import Settings, add_source_arguments, get_fetcher, settings_from_args

console = Console()


def render_to_file(page: PageSpec, settings: Settings, out_path: Path) -> None:
    """Renderuje stronę i zapisuje dokument; błędy kończą komendę kodem 1."""
    fetcher = get_fetcher(settings)
    try:
        html = render_page(
            page,
            fetcher,
            min_loading_time=settings.min_loading_time,
            timeout=settings.render_timeout,
        )
    except asyncio.TimeoutError:
        console.print(
            f"[red]Strona {page.route} nie była gotowa w ciągu "
            f"{settings.render_timeout:g}s.[/red]"
        )
        raise SystemExit(1)
    finally:
        fetcher.close()

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(html, encoding="utf-8")
    console.print(f"[green]HTML:[/green] {out_path}  ({page.route})")


def run(args: argparse.Namespace) -> None:
    try:
        page = find_page(args.route)
    except LookupError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    out_path = Path(args.out or f"{page.slug}.html")
    render_to_file(page, settings, out_path)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "render",
        help="Renderuje stronę portfolio (trasę) do pliku HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Montuje stronę pod PageLoaderem, czeka aż wszystkie pliki XML i obrazy się
załadują (lub zakończą błędem) i zapisuje gotowy dokument HTML.

Przykłady:
  psite render / --public-dir public
  psite render /purger --out dist/purger.html
  psite render /dodgewest --base-url https://example.com --timeout 10
        """,
    )
    p.add_argument(
        "route",
        metavar="TRASA",
        help="Trasa strony, np. / lub /purger.",
    )
    p.add_argument(
        "--out",
        metavar="PLIK",
        default=None,
        help="Plik wynikowy (domyślnie: <slug>.html).",
    )
    add_source_arguments(p)
    p.set_defaults(func=run)

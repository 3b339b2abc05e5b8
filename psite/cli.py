"""
psite — narzędzie CLI strony portfolio.

Użycie:
  psite <komenda> [opcje]

Komendy:
  parse    Konwertuje plik XML treści do drzewa węzłów (lub HTML).
  pages    Listuje strony portfolio i ich zasoby.
  render   Renderuje jedną stronę (trasę) do pliku HTML.
  build    Renderuje wszystkie strony do katalogu wyjściowego.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from psite.commands import parse as cmd_parse
from psite.commands import pages as cmd_pages
from psite.commands import render as cmd_render
from psite.commands import build as cmd_build


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psite",
        description="portfolio-site — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="psite 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_pages.add_parser(subparsers)
    cmd_render.add_parser(subparsers)
    cmd_build.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()

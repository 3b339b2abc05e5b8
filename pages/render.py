"""
pages/render.py — renderowanie strony do kompletnego dokumentu HTML.

Strona jest montowana pod PageLoaderem; dokument powstaje dopiero, gdy bramka
pokaże treść (wszystkie zasoby zakończone i minął czas minimalny).
Komponenty są zawsze odmontowywane, także po przekroczeniu czasu.
"""

from __future__ import annotations

import asyncio

from bs4 import BeautifulSoup

from components import Component, Container, Fetcher, NavBar, PageLoader
from components.page_loader import DEFAULT_MIN_LOADING_TIME
from xml_parser import to_html

from .catalog import PageSpec, nav_routes

_SKELETON = "<!DOCTYPE html><html lang=\"en\"><head></head><body></body></html>"


def document_html(title: str, content: Component) -> str:
    """Składa dokument: pasek nawigacji + <main class="main-content"> z treścią."""
    soup = BeautifulSoup(_SKELETON, "html.parser")
    soup.head.append(soup.new_tag("meta", attrs={"charset": "utf-8"}))
    soup.head.append(soup.new_tag("title", string=title))

    soup.body.append(NavBar(nav_routes()).render(soup))
    main = soup.new_tag("main", attrs={"class": "main-content"})
    main.append(content.render(soup))
    soup.body.append(main)
    return to_html(soup)


async def render_page_async(
    page: PageSpec,
    fetcher: Fetcher,
    *,
    min_loading_time: float | None = DEFAULT_MIN_LOADING_TIME,
    timeout: float | None = None,
) -> str:
    loader = PageLoader(
        Container(*page.build(fetcher)),
        min_loading_time=min_loading_time,
    )
    loader.mount()
    try:
        await loader.wait_until_ready(timeout)
        return document_html(page.title, loader)
    finally:
        loader.unmount()


def render_page(
    page: PageSpec,
    fetcher: Fetcher,
    *,
    min_loading_time: float | None = DEFAULT_MIN_LOADING_TIME,
    timeout: float | None = None,
) -> str:
    """Synchroniczna wersja render_page_async() (własna pętla zdarzeń)."""
    return asyncio.run(render_page_async(
        page,
        fetcher,
        min_loading_time=min_loading_time,
        timeout=timeout,
    ))

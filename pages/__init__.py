"""
pages — strony portfolio i ich renderowanie.

Publiczne API:
  PAGES, PageSpec, find_page(route), nav_routes()
  render_page(page, fetcher, ...)        → dokument HTML
  render_page_async(page, fetcher, ...)  → dokument HTML (w bieżącej pętli)
"""

from .catalog import PAGES, PageSpec, find_page, nav_routes
from .render import document_html, render_page, render_page_async

__all__ = [
    "PAGES",
    "PageSpec",
    "find_page",
    "nav_routes",
    "document_html",
    "render_page",
    "render_page_async",
]

"""components/spinner.py — domyślny placeholder wyświetlany przez PageLoader."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from .base import Component


class DefaultLoadingSpinner(Component):
    def render(self, soup: BeautifulSoup) -> Tag:
        box = soup.new_tag("div", attrs={
            "class":      "loading-spinner-container",
            "role":       "status",
            "aria-label": "Loading",
        })
        box.append(soup.new_tag("div", attrs={"class": "loading-spinner"}))
        return box

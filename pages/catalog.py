"""
pages/catalog.py — katalog stron portfolio.

Każda strona (PageSpec) deklaruje jedynie, jakie pliki XML i obrazy wyświetla;
build(fetcher) zwraca świeże drzewo komponentów (komponenty są jednorazowe).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from components import (
    Component,
    Container,
    Fetcher,
    Heading,
    Screenshot,
    WebLink,
    XMLFileRenderer,
)


@dataclass(frozen=True, slots=True)
class PageSpec:
    route: str                                   # np. "/purger"
    label: str                                   # etykieta w pasku nawigacji
    title: str                                   # <title> dokumentu
    build: Callable[[Fetcher], list[Component]]

    @property
    def slug(self) -> str:
        return self.route.strip("/") or "index"


# ---------------------------------------------------------------------------
# Strona główna
# ---------------------------------------------------------------------------

def _home(fetcher: Fetcher) -> list[Component]:
    independent = Container(
        Heading("Independent / Team Projects", level=2),
        WebLink("/purger", text="Purger", img="/images/Purger/PurgerIcon.png"),
        WebLink(
            "https://thefid.itch.io/cola-killer",
            text="Cola-Killer",
            img="/images/ColaKillerIcon.png",
        ),
        WebLink(
            "https://thefid.itch.io/hue-behind-the-mask",
            text="Hue Behind the Mask",
            img="/images/HueBehindtheMaskIcon.jpg",
        ),
    )
    university = Container(
        Heading("University Group Projects", level=2),
        WebLink("/dodgewest", text="Dodge West", img="/images/DodgeWest/DodgeWestIcon.png"),
        WebLink("/friendinme", text="Friend In Me", img="/images/FriendInMe/FriendInMeIcon.png"),
        WebLink("/eggescape", text="Egg Escape", img="/images/EggEscape/WhelpDragon.png"),
        WebLink(
            "/gambitandtheanchored",
            text="Gambit and the Anchored",
            img="/images/GambitAndTheAnchored/GambitAndAnchoredIcon.png",
        ),
    )
    return [
        Heading("Software Engineer & Gameplay Programmer", level=1),
        XMLFileRenderer("content/Home/AboutMe", fetcher=fetcher),
        Container(independent, university),
    ]


# ---------------------------------------------------------------------------
# Strony projektów
# ---------------------------------------------------------------------------

def _xml_blocks(fetcher: Fetcher, *file_names: str) -> list[Component]:
    return [XMLFileRenderer(name, fetcher=fetcher) for name in file_names]


def _screenshots(prefix: str, names: list[str], alt: str, size: int = 400) -> list[Component]:
    return [
        Screenshot(f"{prefix}/{name}", alt=f"{alt} {i}", size=size)
        for i, name in enumerate(names, start=1)
    ]


def _purger(fetcher: Fetcher) -> list[Component]:
    return _xml_blocks(fetcher, "content/Purger/P_Title", "content/Purger/P_Content")


def _dodge_west(fetcher: Fetcher) -> list[Component]:
    return [
        *_xml_blocks(
            fetcher,
            "content/DodgeWest/DW_Title",
            "content/DodgeWest/DW_Content",
            "content/DodgeWest/DW_MC_Title",
            "content/DodgeWest/DW_MajorContributions",
        ),
        *_screenshots(
            "/images/DodgeWest",
            ["DW_Level1.png", "DW_Level1-2.png", "DW_Level2.png", "DW_Level3.png"],
            alt="Dodge West Screenshot",
        ),
    ]


def _friend_in_me(fetcher: Fetcher) -> list[Component]:
    return _xml_blocks(fetcher, "content/FriendInMe/FIM_Title", "content/FriendInMe/FIM_Content")


def _egg_escape(fetcher: Fetcher) -> list[Component]:
    return [
        *_xml_blocks(fetcher, "content/EggEscape/EE_Title", "content/EggEscape/EE_Content"),
        *_screenshots(
            "/images/EggEscape",
            ["EggEscape-img1.png", "EggEscape-img2.png", "EggEscape-img3.png"],
            alt="EggEscape Screenshot",
        ),
    ]


def _gambit_and_the_anchored(fetcher: Fetcher) -> list[Component]:
    return _xml_blocks(
        fetcher,
        "content/GambitAnchored/GatA_Title",
        "content/GambitAnchored/GtaA_Content",
    )


PAGES: tuple[PageSpec, ...] = (
    PageSpec("/",                     "Home",                    "Portfolio",               _home),
    PageSpec("/purger",               "Projects",                "Purger",                  _purger),
    PageSpec("/dodgewest",            "Dodge West",              "Dodge West",              _dodge_west),
    PageSpec("/friendinme",           "Friend In Me",            "Friend In Me",            _friend_in_me),
    PageSpec("/eggescape",            "Egg Escape",              "Egg Escape",              _egg_escape),
    PageSpec("/gambitandtheanchored", "Gambit And The Anchored", "Gambit And The Anchored", _gambit_and_the_anchored),
)


def nav_routes() -> list[tuple[str, str]]:
    return [(p.route, p.label) for p in PAGES]


def find_page(route: str) -> PageSpec:
    """Zwraca stronę dla trasy (bez rozróżniania wielkości liter i końcowego '/')."""
    key = "/" + route.strip().strip("/").lower()
    for page in PAGES:
        if page.route == key:
            return page
    raise LookupError(f"Nieznana trasa: {route}")

"""
components/page_loader.py — PageLoader: bramka strony.

Przy mount() tworzy własny LoadingTracker i przekazuje go dzieciom.
Wyświetla placeholder, dopóki:
  - tracker ma zarejestrowane zasoby, albo
  - od mount() nie minęło min_loading_time sekund.

Przejście can_display False → True następuje dokładnie raz, zawsze w osobnym
kroku pętli zdarzeń (nigdy synchronicznie w mount()). Timer jest anulowany
przy unmount() oraz gdy tracker ponownie zgłosi ładowanie przed jego odpaleniem.
Zagnieżdżony PageLoader ignoruje tracker rodzica i ma własny zakres.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable

from bs4 import BeautifulSoup, Tag

from loading.tracker import LoadingTracker

from .base import Component
from .spinner import DefaultLoadingSpinner

DEFAULT_MIN_LOADING_TIME = 0.3


def normalize_min_loading_time(value: float | None) -> float:
    """Ujemny lub brakujący czas minimalny traktujemy jako 0."""
    if value is None or value < 0:
        return 0.0
    return float(value)


class PageLoader(Component):
    def __init__(
        self,
        *children: Component,
        loading_component: Component | None = None,
        min_loading_time: float | None = DEFAULT_MIN_LOADING_TIME,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.children          = tuple(children)
        self.loading_component = loading_component or DefaultLoadingSpinner()
        self.min_loading_time  = normalize_min_loading_time(min_loading_time)
        self._clock = clock

        self.tracker: LoadingTracker | None = None
        self.mounted_at: float | None = None

        self._loop: asyncio.AbstractEventLoop | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._ready: asyncio.Event | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._mounted = False
        self._can_display = False

    @property
    def can_display(self) -> bool:
        return self._can_display

    @property
    def is_loading(self) -> bool:
        return self.tracker is not None and self.tracker.is_loading

    # ------------------------------------------------------------------
    # Cykl życia
    # ------------------------------------------------------------------

    def mount(self, tracker: LoadingTracker | None = None) -> None:
        if self._mounted:
            return
        self._loop = asyncio.get_running_loop()
        self._mounted = True
        self.mounted_at = self._clock()
        self._ready = asyncio.Event()

        self.tracker = LoadingTracker()
        self._unsubscribe = self.tracker.subscribe(self._on_loading_changed)

        self.loading_component.mount(None)
        for child in self.children:
            child.mount(self.tracker)

        self._schedule_display()

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._mounted = False
        self._cancel_timer()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        for child in self.children:
            child.unmount()
        self.loading_component.unmount()

        if self.tracker is not None:
            self.tracker.close()

    async def wait_until_ready(self, timeout: float | None = None) -> None:
        """Czeka, aż bramka pokaże treść. Przekroczenie czasu → asyncio.TimeoutError."""
        if self._ready is None:
            raise RuntimeError("PageLoader nie jest zamontowany")
        await asyncio.wait_for(self._ready.wait(), timeout)

    # ------------------------------------------------------------------
    # Timer wyświetlenia
    # ------------------------------------------------------------------

    def _on_loading_changed(self, is_loading: bool) -> None:
        if is_loading:
            self._cancel_timer()
        else:
            self._schedule_display()

    def _schedule_display(self) -> None:
        if not self._mounted or self._can_display or self._timer is not None:
            return
        if self.tracker is None or self.tracker.is_loading:
            return
        elapsed = self._clock() - self.mounted_at
        remaining = max(0.0, self.min_loading_time - elapsed)
        self._timer = self._loop.call_later(remaining, self._display)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _display(self) -> None:
        self._timer = None
        if not self._mounted:
            return
        self._can_display = True
        self._ready.set()

    # ------------------------------------------------------------------
    # Renderowanie
    # ------------------------------------------------------------------

    def render(self, soup: BeautifulSoup) -> Tag:
        if not self._can_display:
            return self.loading_component.render(soup)
        box = soup.new_tag("div")
        for child in self.children:
            box.append(child.render(soup))
        return box

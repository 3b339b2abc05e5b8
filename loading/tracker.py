"""
loading/tracker.py — rejestr zasobów w trakcie ładowania (LoadingTracker).

Niezmiennik: is_loading == (len(pending) > 0) po każdej operacji.

Operacje:
  register_resource(id)       dodaje id do zbioru (zbiór, nie licznik)
  mark_resource_complete(id)  usuwa id; nieznane / już usunięte id → no-op
  is_loading                  flaga zagregowana, liczona synchronicznie

Błędy użycia (podwójne zakończenie, nieznane id, rejestracja po close())
są cichymi no-opami — komponenty montują się i odmontowują niezależnie.
"""

from __future__ import annotations

import secrets
from typing import Callable, TypeAlias

# Słuchacz dostaje nową wartość is_loading przy każdej jej zmianie.
LoadingListener: TypeAlias = Callable[[bool], None]


def new_resource_id(kind: str, source: str) -> str:
    """Buduje identyfikator zasobu: {kind}-{source}-{losowy sufiks}."""
    return f"{kind}-{source}-{secrets.token_hex(4)}"


class LoadingTracker:
    """Zbiór identyfikatorów zasobów, które jeszcze się nie zakończyły."""

    def __init__(self) -> None:
        self._pending: set[str] = set()
        self._listeners: list[LoadingListener] = []
        self._closed = False

    @property
    def is_loading(self) -> bool:
        return len(self._pending) > 0

    @property
    def pending(self) -> frozenset[str]:
        return frozenset(self._pending)

    @property
    def closed(self) -> bool:
        return self._closed

    def register_resource(self, resource_id: str) -> None:
        if self._closed:
            return
        was_loading = self.is_loading
        self._pending.add(resource_id)
        self._notify(was_loading)

    def mark_resource_complete(self, resource_id: str) -> None:
        if resource_id not in self._pending:
            return
        was_loading = self.is_loading
        self._pending.discard(resource_id)
        self._notify(was_loading)

    def subscribe(self, listener: LoadingListener) -> Callable[[], None]:
        """Rejestruje słuchacza zmian is_loading; zwraca funkcję wyrejestrowującą."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Zamyka rejestr: czyści zbiór i słuchaczy, kolejne rejestracje są ignorowane."""
        self._closed = True
        self._pending.clear()
        self._listeners.clear()

    def _notify(self, was_loading: bool) -> None:
        now_loading = self.is_loading
        if now_loading == was_loading:
            return
        for listener in list(self._listeners):
            listener(now_loading)

    def __repr__(self) -> str:
        return f"LoadingTracker(pending={len(self._pending)}, closed={self._closed})"

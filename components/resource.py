"""
components/resource.py — komponent zasobu ładowanego asynchronicznie.

Kontrakt wobec LoadingTrackera (gdy track_loading=True i tracker podany):
  - mount():    nowy identyfikator {kind}-{source}-{sufiks}, register_resource()
  - zakończenie operacji (sukces lub błąd): mark_resource_complete() raz
  - unmount() przed zakończeniem: mark_resource_complete() raz, zadanie anulowane
  - po unmount() żadnych dalszych wywołań trackera ani zmian stanu

Przy track_loading=False tracker nie jest nigdy wywoływany.
Komponent jest jednorazowy: ponowny mount() po unmount() nic nie robi.
"""

from __future__ import annotations

import asyncio
from typing import Any, ClassVar

from rich.console import Console
from rich.markup import escape

from loading.tracker import LoadingTracker, new_resource_id

from .base import Component
from .fetch import Fetcher
from .types import ResourceState

err_console = Console(stderr=True)


class ResourceComponent(Component):
    kind: ClassVar[str] = "res"

    def __init__(
        self,
        source: str,
        *,
        fetcher: Fetcher,
        track_loading: bool = True,
    ) -> None:
        self.source        = source
        self.fetcher       = fetcher
        self.track_loading = track_loading

        self.resource_id: str | None = None
        self.state = ResourceState.LOADING
        self.error: Exception | None = None

        self._tracker: LoadingTracker | None = None
        self._task: asyncio.Task[None] | None = None
        self._mounted   = False
        self._completed = False

    # ------------------------------------------------------------------
    # Do nadpisania
    # ------------------------------------------------------------------

    async def load(self) -> Any:
        """Operacja asynchroniczna zasobu; wynik trafia do apply()."""
        raise NotImplementedError

    def apply(self, payload: Any) -> None:
        """Przyjmuje wynik load(); wołane tylko dla zamontowanego komponentu."""

    # ------------------------------------------------------------------
    # Cykl życia
    # ------------------------------------------------------------------

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def completed(self) -> bool:
        return self._completed

    def mount(self, tracker: LoadingTracker | None = None) -> None:
        if self._mounted or self._completed:
            return
        loop = asyncio.get_running_loop()

        self._mounted = True
        self._tracker = tracker if self.track_loading else None
        self.resource_id = new_resource_id(self.kind, self.source)
        if self._tracker is not None:
            self._tracker.register_resource(self.resource_id)

        self._task = loop.create_task(self._run(), name=self.resource_id)

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._mounted = False
        self._report_complete()
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> None:
        """Czeka na zakończenie zadania (także anulowanego); nie rzuca."""
        if self._task is not None:
            await asyncio.wait({self._task})

    async def _run(self) -> None:
        try:
            payload = await self.load()
            if not self._mounted:
                return
            self.apply(payload)
            self.state = ResourceState.READY
        except asyncio.CancelledError:
            raise
        except Exception as e:
            if self._mounted:
                self.state = ResourceState.FAILED
                self.error = e
                err_console.print(
                    f"[red]Błąd ładowania zasobu[/red] {escape(self.resource_id or self.source)}: "
                    f"{escape(str(e))}"
                )
        finally:
            self._report_complete()

    def _report_complete(self) -> None:
        if self._completed:
            return
        self._completed = True
        if self._tracker is not None:
            self._tracker.mark_resource_complete(self.resource_id)

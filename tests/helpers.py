"""Wspólne atrapy dla testów: fetcher w pamięci, tracker z dziennikiem wywołań, zasoby testowe."""

from __future__ import annotations

import asyncio
import io
import threading

from PIL import Image

from components import FetchError, ResourceComponent
from loading import LoadingTracker


class FakeFetcher:
    """Fetcher w pamięci; wartość będąca wyjątkiem jest rzucana, brak ścieżki → 404."""

    def __init__(
        self,
        texts: dict[str, object] | None = None,
        blobs: dict[str, object] | None = None,
        gate: threading.Event | None = None,
    ) -> None:
        self.texts = texts or {}
        self.blobs = blobs or {}
        self.gate  = gate
        self.calls: list[str] = []

    def _lookup(self, store: dict[str, object], path: str):
        self.calls.append(path)
        if self.gate is not None:
            self.gate.wait(timeout=5)
        key = path.lstrip("/")
        if key not in store:
            raise FetchError(f"404 {path}", status=404)
        value = store[key]
        if isinstance(value, Exception):
            raise value
        return value

    def get_text(self, path: str) -> str:
        return self._lookup(self.texts, path)

    def get_bytes(self, path: str) -> bytes:
        return self._lookup(self.blobs, path)


class RecordingTracker(LoadingTracker):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    def register_resource(self, resource_id: str) -> None:
        self.calls.append(("register", resource_id))
        super().register_resource(resource_id)

    def mark_resource_complete(self, resource_id: str) -> None:
        self.calls.append(("complete", resource_id))
        super().mark_resource_complete(resource_id)


class SleepyResource(ResourceComponent):
    """Zasób kończący się po `delay` sekundach (sukcesem lub błędem)."""

    kind = "test"

    def __init__(self, source: str, delay: float = 0.0, fail: bool = False, **kwargs) -> None:
        kwargs.setdefault("fetcher", FakeFetcher())
        super().__init__(source, **kwargs)
        self.delay = delay
        self.fail  = fail

    async def load(self) -> str:
        await asyncio.sleep(self.delay)
        if self.fail:
            raise FetchError(f"nie udało się: {self.source}")
        return self.source

    def render(self, soup):
        return soup.new_tag("span", string=self.source)


class NeverSettles(SleepyResource):
    async def load(self) -> str:
        await asyncio.Event().wait()
        return self.source


def png_bytes(width: int = 4, height: int = 3) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()

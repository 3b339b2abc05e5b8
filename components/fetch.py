"""
components/fetch.py — pobieranie plików publicznych strony (XML, TXT, obrazy).

HttpFetcher   GET {base_url}/{path} przez requests; status != 2xx → FetchError
LocalFetcher  odczyt z lokalnego katalogu public/; brak pliku → FetchError

Oba są synchroniczne; komponenty wywołują je przez asyncio.to_thread().
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import requests

from .types import FetchError

DEFAULT_TIMEOUT = 30.0


class Fetcher(Protocol):
    def get_text(self, path: str) -> str:
        ...

    def get_bytes(self, path: str) -> bytes:
        ...


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

class HttpFetcher:
    """Pobiera pliki z serwera strony (np. dev-serwera Vite lub hostingu statycznego)."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout  = timeout
        self.session  = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get(self, path: str) -> requests.Response:
        url = self.url_for(path)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Błąd pobierania {url}: {e}") from e
        if not resp.ok:
            raise FetchError(
                f"Nie udało się pobrać {url}: {resp.status_code} {resp.reason}",
                status=resp.status_code,
            )
        return resp

    def get_text(self, path: str) -> str:
        resp = self._get(path)
        # dokumenty treści są w UTF-8; bez charset requests zgadywałby latin-1
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = "utf-8"
        return resp.text

    def get_bytes(self, path: str) -> bytes:
        return self._get(path).content

    def close(self) -> None:
        self.session.close()


# ---------------------------------------------------------------------------
# Katalog lokalny
# ---------------------------------------------------------------------------

class LocalFetcher:
    """Czyta pliki z katalogu publicznego projektu (bez serwera HTTP)."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        target = (self.root / path.lstrip("/")).resolve()
        if not target.is_relative_to(self.root):
            raise FetchError(f"Ścieżka poza katalogiem publicznym: {path}")
        return target

    def get_bytes(self, path: str) -> bytes:
        target = self._resolve(path)
        try:
            return target.read_bytes()
        except OSError as e:
            raise FetchError(f"Nie udało się odczytać {target}: {e}") from e

    def get_text(self, path: str) -> str:
        data = self.get_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FetchError(f"Plik {path} nie jest poprawnym UTF-8: {e}") from e

    def close(self) -> None:
        pass

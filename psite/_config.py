"""
Konfiguracja psite — zmienne środowiskowe (opcjonalnie z pliku .env w katalogu projektu).

  PSITE_BASE_URL          adres serwera z plikami publicznymi   (domyślnie http://localhost:5173)
  PSITE_PUBLIC_DIR        lokalny katalog public/ zamiast HTTP  (domyślnie: brak)
  PSITE_MIN_LOADING_TIME  minimalny czas placeholdera [s]       (domyślnie 0.3)
  PSITE_FETCH_TIMEOUT     timeout pojedynczego żądania [s]      (domyślnie 30)
  PSITE_RENDER_TIMEOUT    maks. czas oczekiwania na stronę [s]  (domyślnie 30)
"""

from __future__ import annotations

import argparse
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from components import Fetcher, HttpFetcher, LocalFetcher

_ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"


@dataclass(slots=True)
class Settings:
    base_url:         str
    public_dir:       pathlib.Path | None
    min_loading_time: float
    fetch_timeout:    float
    render_timeout:   float


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"Zmienna {name} musi być liczbą, otrzymano: {raw!r}") from e


def get_settings() -> Settings:
    load_dotenv(_ENV_FILE, override=False)
    public_dir = os.getenv("PSITE_PUBLIC_DIR")
    return Settings(
        base_url         = os.getenv("PSITE_BASE_URL", "http://localhost:5173"),
        public_dir       = pathlib.Path(public_dir) if public_dir else None,
        min_loading_time = _float_env("PSITE_MIN_LOADING_TIME", 0.3),
        fetch_timeout    = _float_env("PSITE_FETCH_TIMEOUT", 30.0),
        render_timeout   = _float_env("PSITE_RENDER_TIMEOUT", 30.0),
    )


def get_fetcher(settings: Settings) -> Fetcher:
    """LocalFetcher gdy ustawiono katalog publiczny, w przeciwnym razie HttpFetcher."""
    if settings.public_dir is not None:
        return LocalFetcher(settings.public_dir)
    return HttpFetcher(settings.base_url, timeout=settings.fetch_timeout)


def add_source_arguments(p: argparse.ArgumentParser) -> None:
    """Wspólne opcje komend renderujących (nadpisują zmienne środowiskowe)."""
    p.add_argument(
        "--base-url",
        metavar="URL",
        default=None,
        help="Adres serwera z plikami publicznymi (PSITE_BASE_URL).",
    )
    p.add_argument(
        "--public-dir",
        metavar="KATALOG",
        default=None,
        help="Czytaj pliki z lokalnego katalogu public/ zamiast HTTP (PSITE_PUBLIC_DIR).",
    )
    p.add_argument(
        "--min-loading-time",
        metavar="SEK",
        type=float,
        default=None,
        help="Minimalny czas wyświetlania placeholdera w sekundach (PSITE_MIN_LOADING_TIME).",
    )
    p.add_argument(
        "--timeout",
        metavar="SEK",
        type=float,
        default=None,
        help="Maks. czas oczekiwania na gotowość strony (PSITE_RENDER_TIMEOUT).",
    )


def settings_from_args(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if getattr(args, "base_url", None):
        settings.base_url = args.base_url
    if getattr(args, "public_dir", None):
        settings.public_dir = pathlib.Path(args.public_dir)
    if getattr(args, "min_loading_time", None) is not None:
        settings.min_loading_time = args.min_loading_time
    if getattr(args, "timeout", None) is not None:
        settings.render_timeout = args.timeout
    return settings

"""
components/types.py — wyjątki i stany komponentów.

FetchError          — pobranie zasobu nie powiodło się (błąd sieci / status != 2xx)
ConfigurationError  — błędne parametry komponentu (błąd programisty, nie danych)
ResourceState       — stan komponentu zasobu: loading → ready | failed
"""

from __future__ import annotations

from enum import StrEnum


class FetchError(Exception):
    """Nieudane pobranie zasobu; `status` to kod HTTP, jeśli był dostępny."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ConfigurationError(ValueError):
    """Komponent zbudowany z niepoprawnymi parametrami."""


class ResourceState(StrEnum):
    LOADING = "loading"
    READY   = "ready"
    FAILED  = "failed"

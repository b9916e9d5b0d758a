"""Implementaciones sencillas de `TokenSupplier`.

La obtención/renovación real del token vive fuera de este cliente; estas
clases cubren los casos de token fijo y token leído de configuración.
"""

from __future__ import annotations

from typing import Callable

from core.config import AppSettings
from core.errors import ConfigurationError


class StaticTokenSupplier:
    """Devuelve siempre el mismo token."""

    def __init__(self, token: str) -> None:
        if not token or not token.strip():
            raise ConfigurationError("Bearer token must be a non-empty string.")
        self._token = token.strip()

    def __call__(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return "StaticTokenSupplier(token='***')"


class SettingsTokenSupplier:
    """Lee `CRPT_AUTH_TOKEN` (o `.env`) en cada llamada.

    Releer en cada llamada permite rotar el token sin reconstruir el cliente.
    """

    def __init__(self, settings_factory: Callable[[], AppSettings] = AppSettings) -> None:
        self._settings_factory = settings_factory

    def __call__(self) -> str:
        token = self._settings_factory().auth_token
        if not token:
            raise ConfigurationError("CRPT_AUTH_TOKEN is not configured.")
        return token

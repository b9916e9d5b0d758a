"""Errores del cliente.

Por qué una jerarquía propia:
- El llamador captura `CrptApiError` sin conocer httpx ni pydantic.
- La excepción original siempre queda encadenada (`__cause__`).

Una respuesta no-2xx NO es un error a este nivel: se devuelve tal cual.
"""

from __future__ import annotations

from typing import Any


class CrptApiError(Exception):
    """Base de todos los errores del cliente."""

    code = "CRPT_API_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(CrptApiError):
    """Parámetros de construcción inválidos (límite, token ausente, etc.)."""

    code = "CONFIGURATION_ERROR"


class SerializationError(CrptApiError):
    """El documento o el sobre no se pudo convertir a JSON."""

    code = "SERIALIZATION_ERROR"


class TransportError(CrptApiError):
    """Fallo de red, timeout o interrupción durante el envío."""

    code = "TRANSPORT_ERROR"

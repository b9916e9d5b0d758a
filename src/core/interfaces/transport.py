"""Contrato del transporte HTTP.

Permite que `CrptApi` se pruebe con un transporte falso sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CreateDocumentResponse


@runtime_checkable
class DocumentTransport(Protocol):
    """Envía un cuerpo JSON ya construido y devuelve la respuesta cruda."""

    def send(self, body: str, product_group: str) -> CreateDocumentResponse:
        """Un único POST síncrono; los fallos de red se propagan como `TransportError`."""

        ...

"""Contrato del limitador de peticiones."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PermitGate(Protocol):
    """Bloquea al hilo llamador hasta que haya un permiso disponible."""

    def acquire(self) -> None:
        """Consume exactamente un permiso; no tiene timeout ni falla."""

        ...

"""Contrato del proveedor de bearer tokens.

Por qué Protocol:
- Cualquier callable sin argumentos que devuelva `str` lo satisface
  (función, lambda, objeto con `__call__`), sin herencia rígida.
- El cliente no gestiona el ciclo de vida del token: solo lo pide.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenSupplier(Protocol):
    """Devuelve el bearer token vigente.

    Reglas de diseño:
    - Se invoca una vez por petición (nunca se cachea en el cliente).
    - Debe ser seguro llamarlo desde varios hilos a la vez.
    """

    def __call__(self) -> str:
        ...

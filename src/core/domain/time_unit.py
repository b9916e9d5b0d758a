"""Unidades de tiempo para expresar el límite de peticiones.

Se mantiene en el dominio para que el servicio y el adaptador de rate
limiting compartan una única fuente de verdad sin imports circulares.
"""

from __future__ import annotations

from enum import Enum

_MILLISECONDS_PER_UNIT = {
    "milliseconds": 1,
    "seconds": 1_000,
    "minutes": 60_000,
    "hours": 3_600_000,
    "days": 86_400_000,
}


class TimeUnit(str, Enum):
    """Ventana sobre la que se cuentan `request_limit` peticiones."""

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @classmethod
    def _missing_(cls, value: object) -> "TimeUnit | None":
        # Acepta "MINUTES", "Minutes", etc. (env vars, kwargs de usuario).
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    def milliseconds(self) -> int:
        """Duración de una unidad en milisegundos."""

        return _MILLISECONDS_PER_UNIT[self.value]

    def seconds(self) -> float:
        """Duración de una unidad en segundos."""

        return self.milliseconds() / 1_000

"""Rate gate sobre pyrate-limiter.

Por qué un wrapper:
- pyrate-limiter resuelve la contabilidad de la ventana (`InMemoryBucket`);
  aquí solo añadimos la espera bloqueante y el orden de llegada entre hilos.
- Reloj y `sleep` inyectables: los tests no necesitan dormir de verdad.

Semántica:
- `request_limit` permisos por cada ventana móvil de un `time_unit`
  (ráfaga máxima = `request_limit`).
- Los hilos se atienden en orden de llegada (cola de tickets); solo el hilo en
  cabeza consulta el bucket, así que ningún permiso se emite dos veces.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from pyrate_limiter import InMemoryBucket, Rate, RateItem

from core.domain.time_unit import TimeUnit
from core.errors import ConfigurationError
from core.logging import get_logger

_ITEM_NAME = "crpt-create-document"

logger = get_logger(__name__)


def validate_rate(time_unit: TimeUnit | str, request_limit: int) -> TimeUnit:
    """Valida el par (unidad, límite) y devuelve la unidad normalizada."""

    if isinstance(request_limit, bool) or not isinstance(request_limit, int) or request_limit < 1:
        raise ConfigurationError(
            "request_limit must be a positive integer.",
            details={"request_limit": request_limit},
        )
    try:
        return TimeUnit(time_unit)
    except ValueError as exc:
        raise ConfigurationError(
            f"Unsupported time unit: {time_unit!r}.",
            details={"time_unit": str(time_unit)},
        ) from exc


class TokenBucketGate:
    """Limita `acquire()` a `request_limit` llamadas por `time_unit`."""

    def __init__(
        self,
        time_unit: TimeUnit | str,
        request_limit: int,
        *,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.time_unit = validate_rate(time_unit, request_limit)
        self.request_limit = request_limit
        self.permits_per_second = request_limit / self.time_unit.seconds()

        self._bucket = InMemoryBucket([Rate(request_limit, self.time_unit.milliseconds())])
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep

        self._condition = threading.Condition()
        self._next_ticket = 0
        self._now_serving = 0
        self._abandoned: set[int] = set()

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def acquire(self) -> None:
        with self._condition:
            ticket = self._next_ticket
            self._next_ticket += 1
            try:
                while ticket != self._now_serving:
                    self._condition.wait()
            except BaseException:
                # Interrumpido en la cola: su turno se salta, no se sirve nunca.
                if ticket == self._now_serving:
                    self._advance()
                else:
                    self._abandoned.add(ticket)
                raise

        try:
            self._take_permit()
        finally:
            # También si el hilo fue interrumpido: el siguiente no debe quedar bloqueado.
            with self._condition:
                self._advance()

    def _advance(self) -> None:
        """Pasa el turno al siguiente ticket vivo. Requiere `_condition` tomado."""

        self._now_serving += 1
        while self._now_serving in self._abandoned:
            self._abandoned.discard(self._now_serving)
            self._now_serving += 1
        self._condition.notify_all()

    def _take_permit(self) -> None:
        waited_ms = 0
        while True:
            now = self._now_ms()
            self._bucket.leak(now)
            item = RateItem(_ITEM_NAME, now)
            if self._bucket.put(item):
                if waited_ms:
                    logger.debug("rate_gate.acquired", waited_ms=waited_ms)
                return

            delay_ms = max(int(self._bucket.waiting(item)), 1)
            if not waited_ms:
                logger.debug(
                    "rate_gate.waiting",
                    delay_ms=delay_ms,
                    request_limit=self.request_limit,
                    time_unit=self.time_unit.value,
                )
            waited_ms += delay_ms
            self._sleep(delay_ms / 1000)

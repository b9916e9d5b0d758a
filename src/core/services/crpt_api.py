"""Cliente de creación de documentos con límite de peticiones.

Este módulo orquesta el flujo completo de una llamada:
rate gate (bloqueante) -> construcción del sobre -> POST -> respuesta cruda.

Un `CrptApi` es un objeto de vida larga: su gate y su transporte se comparten
entre todos los hilos que lo usen, y esa es la única coordinación entre
llamadas. Cada llamada construye objetos nuevos e independientes, así que un
fallo nunca deja estado a medias.
"""

from __future__ import annotations

from types import TracebackType

from adapters.http_client import HttpxDocumentTransport
from adapters.rate_gate import TokenBucketGate, validate_rate
from core.config import AppSettings
from core.domain.models import CreateDocumentResponse, Document
from core.domain.time_unit import TimeUnit
from core.interfaces.rate_gate import PermitGate
from core.interfaces.token_supplier import TokenSupplier
from core.interfaces.transport import DocumentTransport
from core.logging import get_logger
from core.services.request_builder import build_create_request, serialize_request

logger = get_logger(__name__)


class CrptApi:
    """Envía documentos LP_INTRODUCE_GOODS respetando `request_limit` por `time_unit`.

    `gate` y `transport` son inyectables (tests, limitadores deterministas);
    por defecto se crean un `TokenBucketGate` y un `HttpxDocumentTransport`.
    `time_unit` y `request_limit` se validan siempre, también con `gate` inyectado.
    """

    def __init__(
        self,
        time_unit: TimeUnit | str,
        request_limit: int,
        token_supplier: TokenSupplier,
        *,
        settings: AppSettings | None = None,
        gate: PermitGate | None = None,
        transport: DocumentTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        validate_rate(time_unit, request_limit)
        self._gate = gate or TokenBucketGate(time_unit, request_limit)
        self._owns_transport = transport is None
        self._transport = transport or HttpxDocumentTransport(
            token_supplier,
            settings=self._settings,
        )

    def create_document(
        self,
        document: Document,
        signature: str,
        product_group: str,
    ) -> CreateDocumentResponse:
        """Crea un documento de introducción de bienes.

        Bloquea hasta obtener permiso del gate. Devuelve status y body sin
        interpretar; `SerializationError` y `TransportError` se propagan.
        """

        self._gate.acquire()

        request = build_create_request(document, signature, product_group)
        body = serialize_request(request)
        logger.debug(
            "crpt.create_document.built",
            doc_id=document.doc_id,
            product_group=product_group,
            body_bytes=len(body),
        )
        return self._transport.send(body, product_group)

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxDocumentTransport):
            self._transport.close()

    def __enter__(self) -> "CrptApi":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging para la API de documentos.
- Facilita testeo: se puede sustituir el `httpx.Client` por uno con
  `httpx.MockTransport`, o el transporte entero por un stub.

Lo que NO hace: reintentos, backoff ni parseo del body. Un status no-2xx se
devuelve tal cual; decidir si es un fallo es cosa del llamador.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from core.config import AppSettings
from core.domain.models import CreateDocumentResponse
from core.errors import TransportError
from core.interfaces.token_supplier import TokenSupplier
from core.logging import get_logger

CREATE_DOCUMENT_PATH = "/api/v3/lk/documents/create?pg={product_group}"

logger = get_logger(__name__)


def build_sync_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


def create_document_url(product_group: str, *, base_url: str = "https://ismp.crpt.ru") -> str:
    """URL de creación con el grupo de producto interpolado en `pg`."""

    return base_url.rstrip("/") + CREATE_DOCUMENT_PATH.format(product_group=product_group)


class HttpxDocumentTransport:
    """Transporte síncrono: un POST por llamada, token pedido en cada envío."""

    def __init__(
        self,
        token_supplier: TokenSupplier,
        *,
        client: httpx.Client | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._token_supplier = token_supplier
        self._owns_client = client is None
        self._client = client or build_sync_client(self._settings)

    def send(self, body: str, product_group: str) -> CreateDocumentResponse:
        url = create_document_url(product_group, base_url=self._settings.base_url)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token_supplier()}",
        }

        logger.info("crpt.create_document.request", product_group=product_group, url=url)
        try:
            response = self._client.post(url, content=body.encode("utf-8"), headers=headers)
        except httpx.RequestError as exc:
            logger.error(
                "crpt.create_document.transport_error",
                product_group=product_group,
                url=url,
                error=str(exc),
            )
            raise TransportError(
                f"Request to {url} failed: {exc}",
                details={"url": url, "product_group": product_group},
            ) from exc

        logger.info(
            "crpt.create_document.response",
            product_group=product_group,
            status_code=response.status_code,
        )
        return CreateDocumentResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxDocumentTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

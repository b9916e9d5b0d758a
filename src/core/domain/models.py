"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- La serialización (`model_dump_json`) respeta el orden de declaración y los
  alias de wire, que es exactamente lo que espera la API.

Nota:
- Todos los modelos son inmutables (`frozen=True`): el documento pertenece al
  llamador y el cliente solo lo lee.
- Los campos en `None` se omiten al serializar (`exclude_none=True`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.vocabulary import DocumentFormat, OperationType


class Description(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    participant_inn: str | None = Field(
        default=None,
        alias="participantInn",
        description="INN del participante.",
    )


class Product(BaseModel):
    """Una línea de producto del documento de introducción."""

    model_config = ConfigDict(frozen=True)

    certificate_document: str | None = None
    certificate_document_date: str | None = None
    certificate_document_number: str | None = None
    owner_inn: str | None = None
    producer_inn: str | None = None
    production_date: str | None = None
    tnved_code: str | None = Field(
        default=None,
        description="Código TN VED (clasificación aduanera).",
    )
    uit_code: str | None = None
    uitu_code: str | None = None


class Document(BaseModel):
    """Documento de introducción de bienes en circulación (LP_INTRODUCE_GOODS).

    El orden de los campos es el orden en el JSON enviado.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: Description | None = None
    doc_id: str | None = None
    doc_status: str | None = None
    doc_type: str | None = None
    import_request: bool | None = Field(
        default=None,
        alias="importRequest",
        description="Marca de importación; se omite si no se indica.",
    )
    owner_inn: str | None = None
    participant_inn: str | None = None
    producer_inn: str | None = None
    production_date: str | None = None
    production_type: str | None = None
    products: tuple[Product, ...] | None = Field(
        default=None,
        description="Líneas de producto, en el orden dado por el llamador.",
    )
    reg_date: str | None = None
    reg_number: str | None = None


class CreateDocumentRequest(BaseModel):
    """Sobre enviado a `/api/v3/lk/documents/create`.

    Se construye uno nuevo por llamada y no se modifica nunca.
    """

    model_config = ConfigDict(frozen=True)

    document_format: DocumentFormat = Field(
        ...,
        description="Codificación del documento embebido.",
    )
    product_document: str = Field(
        ...,
        description="Base64 del JSON del `Document`.",
    )
    product_group: str = Field(
        ...,
        description="Grupo de producto (p.ej. 'milk').",
    )
    signature: str = Field(
        ...,
        description="Firma calculada externamente; se envía sin validar.",
    )
    type: OperationType = Field(
        ...,
        description="Operación regulatoria solicitada.",
    )


class CreateDocumentResponse(BaseModel):
    """Respuesta cruda del servidor: status + body, sin interpretar."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., ge=100, le=599)
    body: str = Field(default="")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

"""Construcción del sobre `CreateDocumentRequest`.

Formato y operación están fijados a `MANUAL` + `LP_INTRODUCE_GOODS`.
Firma y grupo de producto pasan sin validar: el servidor decide.
"""

from __future__ import annotations

from pydantic_core import PydanticSerializationError

from core.domain.models import CreateDocumentRequest, Document
from core.domain.vocabulary import DocumentFormat, OperationType
from core.errors import SerializationError
from core.services.document_encoder import encode_document


def build_create_request(
    document: Document,
    signature: str,
    product_group: str,
) -> CreateDocumentRequest:
    return CreateDocumentRequest(
        document_format=DocumentFormat.MANUAL,
        product_document=encode_document(document),
        product_group=product_group,
        signature=signature,
        type=OperationType.LP_INTRODUCE_GOODS,
    )


def serialize_request(request: CreateDocumentRequest) -> str:
    """JSON del sobre (sin `None`, indentado para legibilidad)."""

    try:
        return request.model_dump_json(exclude_none=True, indent=2)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(
            "Could not serialize create-document request to JSON.",
            details={"product_group": request.product_group},
        ) from exc

"""Codificación del documento para `product_document`.

JSON canónico (orden de declaración, sin `None`, con alias de wire) y luego
Base64 estándar sobre los bytes UTF-8. Funciones puras, sin I/O.
"""

from __future__ import annotations

import base64

from pydantic_core import PydanticSerializationError

from core.domain.models import Document
from core.errors import SerializationError


def document_to_json(document: Document) -> str:
    """Serializa `document` a JSON compacto omitiendo campos `None`."""

    try:
        return document.model_dump_json(exclude_none=True, by_alias=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(
            "Could not serialize document to JSON.",
            details={"doc_id": getattr(document, "doc_id", None)},
        ) from exc


def encode_document(document: Document) -> str:
    """Base64 del JSON de `document` (alfabeto estándar, con padding)."""

    raw = document_to_json(document).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")

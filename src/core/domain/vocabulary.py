"""Vocabulario del sobre de creación de documentos.

El cliente solo emite `MANUAL` + `LP_INTRODUCE_GOODS`; el resto de valores
existen para documentar el vocabulario completo de la API.
"""

from __future__ import annotations

from enum import Enum


class DocumentFormat(str, Enum):
    """Codificación del documento embebido en `product_document`."""

    MANUAL = "MANUAL"
    XML = "XML"
    CSV = "CSV"


class OperationType(str, Enum):
    """Operación regulatoria solicitada."""

    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"
    LP_INTRODUCE_GOODS_CSV = "LP_INTRODUCE_GOODS_CSV"
    LP_INTRODUCE_GOODS_XML = "LP_INTRODUCE_GOODS_XML"

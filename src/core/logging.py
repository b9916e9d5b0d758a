"""Logging estructurado (structlog).

La librería solo pide loggers; configurar la salida es decisión de la
aplicación que la embebe (`configure_logging`). Hasta entonces no se
escribe nada en stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.config import AppSettings


def configure_logging(level: str = "info", *, json: bool = False) -> None:
    """Configura structlog sobre el logging estándar."""

    renderer: Any
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )


def configure_from_settings(settings: AppSettings | None = None) -> None:
    """Aplica `CRPT_LOG_LEVEL` / `CRPT_LOG_JSON`."""

    settings = settings or AppSettings()
    configure_logging(settings.log_level, json=settings.log_json)


def get_logger(name: str) -> Any:
    """Logger structlog sobre `logging.getLogger(name)`.

    Sin `configure_logging` el logger estándar no tiene handlers propios
    (solo `NullHandler`) y su nivel efectivo es WARNING: debug/info no salen.
    Los procesadores se resuelven de forma perezosa desde la config global.
    """

    stdlib_logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in stdlib_logger.handlers):
        stdlib_logger.addHandler(logging.NullHandler())
    return structlog.wrap_logger(stdlib_logger, wrapper_class=structlog.stdlib.BoundLogger)

"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los servicios.
- Permite que adaptadores (HTTP/token) lean config de forma consistente.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para servicios/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRPT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://ismp.crpt.ru",
        min_length=8,
        description="Base URL de la API de registro de documentos.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="crpt-client/0.1",
        min_length=1,
        description="User-Agent para peticiones a la API.",
    )

    auth_token: str | None = Field(
        default=None,
        description="Bearer token estático (lo usa `SettingsTokenSupplier`).",
    )

    log_level: str = Field(
        default="info",
        description="Nivel de logging (debug/info/warning/error).",
    )
    log_json: bool = Field(
        default=False,
        description="Renderizar logs como JSON en vez de consola.",
    )

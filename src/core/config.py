"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (socket/framing) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "tinyhttp"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tinyhttp"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tinyhttp"
    return Path.home() / ".config" / "tinyhttp"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="TINYHTTP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    recv_buffer_size: int = Field(
        default=4096,
        ge=1,
        le=16 * 1024 * 1024,
        description="Bytes por lectura en modo identity.",
    )
    connect_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout del socket (segundos). None bloquea sin límite.",
    )
    default_headers: list[str] = Field(
        default_factory=list,
        description="Headers 'Name: Value' enviados antes de los de -H.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging raíz (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value!r}")
        return level

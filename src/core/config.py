"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "catfacts-lab"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "catfacts-lab"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "catfacts-lab"
    return Path.home() / ".config" / "catfacts-lab"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.

    Es de solo lectura durante la vida del proceso; la CLI aplica overrides
    por invocación como kwargs del constructor.
    """

    model_config = SettingsConfigDict(
        env_prefix="CATFACTS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        frozen=True,
    )

    base_url: str = Field(
        default="https://catfact.ninja",
        min_length=8,
        description="Base URL de la API CatFacts.",
    )
    facts_limit: int = Field(
        default=3,
        ge=1,
        le=500,
        description="Cantidad de hechos pedidos por el reporte múltiple (`limit`).",
    )
    sequential: bool = Field(
        default=False,
        description="Ejecutar los reportes uno tras otro en vez de concurrentes.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Nivel mínimo de logs (se escriben en stderr).",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Formato de logs: legible (console) o JSON.",
    )

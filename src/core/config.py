"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que generadores y comandos lean los mismos defaults.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language

APP_NAME = "rutcheck"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y generadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="RUTCHECK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    random_seed: int | None = Field(
        default=None,
        description="Semilla para generadores reproducibles (None = entropía del sistema).",
    )
    old_plate_probability: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Probabilidad de formato antiguo en la generación mixta de patentes.",
    )
    company_active_probability: float = Field(
        default=0.9,
        ge=0.0,
        le=1.0,
        description="Probabilidad de que una empresa de demo quede activa.",
    )

    demo_companies: int = Field(default=10, ge=0, le=1000)
    demo_plates_per_format: int = Field(default=10, ge=0, le=1000)
    demo_personal_ruts: int = Field(default=5, ge=0, le=1000)

    default_language: Language = Field(
        default_factory=Language.default,
        description="Idioma por defecto de la salida de la CLI (en/es).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

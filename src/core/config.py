"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El validador no lee configuración: solo la CLI y los adaptadores la usan.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.document_type import DocumentType

APP_NAME = "rd-docs"
ENV_PREFIX = "RD_DOCS_"


def get_user_config_dir() -> Path:
    """Carpeta de configuración del usuario según la plataforma."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or Path.home()) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str]:
    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Actualiza claves en el .env del usuario (python-dotenv), creando el archivo si falta."""

    env_path = get_user_env_file()
    if not env_path.exists():
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.write_text(f"# {APP_NAME} user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    default_document_type: DocumentType | None = Field(
        default=None,
        description="Tipo usado para filas de lote sin tipo explícito.",
    )
    batch_delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Separador de columnas en archivos de lote.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en modo interactivo.",
    )

    @field_validator("default_document_type", mode="before")
    @classmethod
    def parse_document_type(cls, value: object) -> object:
        # same spellings as the CLI: "DNI", "Passport", "rnc", 1..3
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return DocumentType.parse(value) or value


def load_settings() -> AppSettings:
    """Carga la configuración efectiva.

    Orden: proyecto primero (dev), luego config global de usuario. El path
    del usuario se resuelve en cada llamada, no al importar el módulo.
    """

    return AppSettings(_env_file=(".env", str(get_user_env_file())))

"""Configuración del Core.

Las variables `MACHINE_UUID_*` se leen del entorno, de un `.env` en el
directorio actual y del `.env` del usuario, en ese orden de prioridad.
Un valor inválido se reporta como `ConfigurationError`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from machine_uuid.core.domain.platform import Platform
from machine_uuid.core.errors import ConfigurationError

APP_DIR_NAME = "machine-uuid"
ENV_PREFIX = "MACHINE_UUID_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _config_base() -> Path:
    # %APPDATA% en Windows, Application Support en macOS, XDG en el resto.
    home = Path.home()
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or home)
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    return Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")


def get_user_config_dir() -> Path:
    """Carpeta donde vive el `.env` global del usuario."""

    return _config_base() / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la librería y la CLI."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    command_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout del comando del sistema (segundos). None = esperar indefinidamente.",
    )
    platform: Platform | None = Field(
        default=None,
        description="Fuerza una plataforma (windows/macos/linux) en vez de detectarla.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging que instala la CLI.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> AppSettings:
    """Construye `AppSettings` convirtiendo errores de validación en `ConfigurationError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ()))
            problems.append(f"{ENV_PREFIX}{field.upper()}: {error.get('msg')}")
        raise ConfigurationError("Invalid configuration: " + "; ".join(problems)) from exc

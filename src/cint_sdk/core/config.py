"""Configuración del SDK.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar el Facade.
- Permite que adaptadores (HTTP) y la CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from dotenv import set_key
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio por usuario donde `cint doctor setup` guarda credenciales."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / "cint-sdk"
    return Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))) / "cint-sdk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Actualiza claves `CINT_*` en el .env de usuario; `None` deja la clave intacta."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class CintSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para Facade/Dispatcher/CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="CINT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    protocol: Literal["http", "https"] = Field(
        default="https",
        description="Esquema de transporte: 'http' (plano) o 'https' (cifrado).",
    )
    host: str = Field(
        default="cdp.cintworks.net",
        min_length=1,
        description="Host de la API de gestión de paneles.",
    )
    key: str | None = Field(
        default=None,
        description="Identificador de la credencial (también key de panel por defecto).",
    )
    secret: SecretStr | None = Field(
        default=None,
        description="Secreto de la credencial para HTTP Basic.",
    )
    panel_key: str | None = Field(
        default=None,
        description="Resource key por defecto; si falta se usa `key`.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default="cint-sdk/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}"

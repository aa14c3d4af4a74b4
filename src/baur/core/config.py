"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/procesos) lean config de forma consistente.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from baur import __version__

TOOL_NAME = "baur"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (XDG)."""

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / TOOL_NAME
    return Path.home() / ".config" / TOOL_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def get_default_cache_dir() -> Path:
    """Raíz de la caché de recetas: `~/.cache/baur` salvo que XDG diga otra cosa."""

    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / TOOL_NAME
    return Path.home() / ".cache" / TOOL_NAME


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="BAUR_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    aur_base_url: str = Field(
        default="https://aur.archlinux.org",
        min_length=8,
        description="Host del AUR: API RPC y repositorios git `<nombre>.git`.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"{TOOL_NAME}/{__version__}",
        min_length=1,
        description="User-Agent para las consultas al AUR.",
    )

    cache_dir: Path | None = Field(
        default=None,
        description="Directorio de caché para los clones (por defecto ~/.cache/baur).",
    )
    git_command: str = Field(
        default="git",
        min_length=1,
        description="Ejecutable usado para clonar recetas.",
    )
    build_command: str = Field(
        default="makepkg",
        min_length=1,
        description="Herramienta de build invocada dentro del clon.",
    )
    build_flags: list[str] = Field(
        default_factory=lambda: ["-si"],
        description="Flags de instalación+build pasados a la herramienta de build.",
    )
    manual_page: str = Field(
        default=TOOL_NAME,
        min_length=1,
        description="Página de manual mostrada para operaciones sin implementar.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    def resolved_cache_dir(self) -> Path:
        return self.cache_dir or get_default_cache_dir()

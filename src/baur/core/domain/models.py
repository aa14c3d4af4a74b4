"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta del JSON del AUR en el borde, sin acceso
  dinámico a claves con valores por defecto.
- Los valores por defecto de presentación ("Unknown", "No description")
  viven en la capa de UI, nunca aquí.

Nota:
- Estos modelos describen *qué* es un paquete remoto, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PackageRecord(BaseModel):
    """Un paquete tal como lo describe la API RPC del AUR."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str = Field(
        ...,
        alias="Name",
        min_length=1,
        description="Nombre del paquete (también nombre del repo git).",
    )
    version: str | None = Field(
        default=None,
        alias="Version",
        description="Versión `pkgver-pkgrel` publicada.",
    )
    description: str | None = Field(
        default=None,
        alias="Description",
        description="Descripción corta del paquete.",
    )
    maintainer: str | None = Field(
        default=None,
        alias="Maintainer",
        description="Mantenedor actual (None si el paquete está huérfano).",
    )
    url: str | None = Field(
        default=None,
        alias="URL",
        description="Web del proyecto upstream.",
    )
    out_of_date: int | None = Field(
        default=None,
        alias="OutOfDate",
        description="Timestamp en que se marcó como desactualizado, si aplica.",
    )


class RpcResponse(BaseModel):
    """Envoltorio común de las respuestas `/rpc/v5/...`."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(
        default="multiinfo",
        description="Tipo de respuesta: `multiinfo`, `search` o `error`.",
    )
    results: list[PackageRecord] = Field(
        default_factory=list,
        description="Paquetes encontrados (cero o más).",
    )
    error: str | None = Field(
        default=None,
        description="Mensaje de error cuando `type == 'error'`.",
    )

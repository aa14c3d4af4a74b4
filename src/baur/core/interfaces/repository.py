"""Contrato del índice remoto de paquetes.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El orquestador se prueba con un repositorio en memoria, sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from baur.core.domain.models import PackageRecord


@runtime_checkable
class PackageRepository(Protocol):
    """Lecturas idempotentes contra el índice remoto.

    Reglas de diseño:
    - Ambas operaciones son síncronas y sin estado.
    - Cero resultados no es un error: se devuelve una lista vacía.
    """

    def lookup_by_name(self, name: str) -> list[PackageRecord]:
        """Búsqueda exacta por nombre (`info`)."""

        ...

    def search_by_fragment(self, fragment: str) -> list[PackageRecord]:
        """Búsqueda por fragmento en nombre o descripción."""

        ...

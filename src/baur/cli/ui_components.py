"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de dispatch con detalles visuales.
- Aquí (y solo aquí) se sustituyen los campos ausentes por "Unknown"/"No description".
"""

from __future__ import annotations

from collections.abc import Sequence

import typer
from rich.console import Console
from rich.text import Text

from baur.core.domain.models import PackageRecord

UNKNOWN = "Unknown"
NO_DESCRIPTION = "No description"
ORIGIN = "aur"


def print_search_results(console: Console, records: Sequence[PackageRecord]) -> None:
    """Lista estilo `pacman -Ss`: `aur/nombre versión` y la descripción indentada."""

    for record in records:
        header = Text.assemble(
            (f"{ORIGIN}/", "bold magenta"),
            (record.name, "bold"),
            " ",
            (record.version or UNKNOWN, "bold green"),
        )
        if record.out_of_date:
            header.append(" (Out-of-date)", style="bold red")
        console.print(header, soft_wrap=True)
        console.print(Text(f"    {record.description or UNKNOWN}"), soft_wrap=True)


def print_package(console: Console, record: PackageRecord) -> None:
    """Ficha del paquete resuelto antes de pedir confirmación."""

    rows = [
        ("Name", record.name or UNKNOWN),
        ("Version", record.version or UNKNOWN),
        ("Description", record.description or NO_DESCRIPTION),
    ]
    if record.maintainer:
        rows.append(("Maintainer", record.maintainer))
    if record.url:
        rows.append(("URL", record.url))
    for label, value in rows:
        console.print(Text.assemble((f"{label}: ", "bold"), value), soft_wrap=True)


def confirm_install(record: PackageRecord) -> bool:
    """Pregunta s/n. Una entrada vacía equivale a *no*."""

    return typer.confirm(f"Do you want to install {record.name}?", default=False)


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("error: ", "bold red"), message), soft_wrap=True)

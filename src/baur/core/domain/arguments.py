"""Parsing de argumentos al estilo pacman.

Por qué una función pura:
- La línea de comandos tiene la forma `-<op><flags...> [target] [--opciones...]`
  y se parsea sin imprimir, sin salir del proceso y sin tocar el entorno.
- El resultado es inmutable y se consume una sola vez por el dispatcher.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from baur.core.errors import ParseError


@dataclass(frozen=True)
class ParsedArguments:
    """Operation, its flags (in order), the target and any long options."""

    operation: str | None = None
    operation_flags: tuple[str, ...] = ()
    target: str | None = None
    additional_options: tuple[str, ...] = field(default_factory=tuple)

    def has_option(self, name: str) -> bool:
        return f"--{name}" in self.additional_options


def parse_arguments(argv: Iterable[str]) -> ParsedArguments:
    """Split ``argv`` (without the program name) into a ParsedArguments.

    Raises ParseError when a second operation token or a second target
    appears, regardless of where they sit in the list.
    """

    operation: str | None = None
    flags: list[str] = []
    target: str | None = None
    options: list[str] = []

    for token in argv:
        if token.startswith("--"):
            options.append(token)
        elif token.startswith("-") and len(token) > 1:
            if operation is not None:
                raise ParseError("Multiple operations provided")
            operation = token[1]
            flags.extend(token[2:])
        elif target is None:
            target = token
        else:
            raise ParseError("Multiple targets provided")

    return ParsedArguments(
        operation=operation,
        operation_flags=tuple(flags),
        target=target,
        additional_options=tuple(options),
    )

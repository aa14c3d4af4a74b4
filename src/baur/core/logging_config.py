"""Configuración de logging, invocada una vez por ejecución desde la CLI.

Por qué aquí:
- Todo módulo con `logger = logging.getLogger(__name__)` hereda esta config.
- Precedencia: opción `--debug` > BAUR_LOG_LEVEL > WARNING.
- Rich en stderr para que los logs no se mezclen con la salida del build.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "baur-console"

# Noisy at DEBUG, and not ours.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "WARNING", quiet_third_party: bool = True) -> None:
    """Install a Rich handler on stderr for the root logger."""

    numeric_level = _parse_level(level)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=numeric_level <= logging.DEBUG,
        markup=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)

    if quiet_third_party and numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def _parse_level(level: str) -> int:
    numeric = logging.getLevelName(level.strip().upper())
    if isinstance(numeric, int):
        return numeric
    return logging.WARNING

"""Script de ejecución.

Permite ejecutar la CLI con `python -m baur`.
"""

from __future__ import annotations

from baur.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()

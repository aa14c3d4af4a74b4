"""Contrato para lanzar programas externos (git, makepkg, man).

Por qué dos capacidades:
- `run`: hasta terminar, heredando los streams estándar.
- `stream`: ejecución acotada a un contexto cuyo stdout se consume línea a
  línea según llega.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessStream(Protocol):
    """Lazy, finite, single-use sequence of stdout lines."""

    returncode: int | None

    def __iter__(self) -> Iterator[str]: ...


@runtime_checkable
class ProcessRunner(Protocol):
    def run(self, argv: Sequence[str], cwd: Path | None = None) -> int:
        """Run ``argv`` inheriting stdio and return its exit status."""

        ...

    def stream(
        self, argv: Sequence[str], cwd: Path | None = None
    ) -> AbstractContextManager[ProcessStream]:
        """Spawn ``argv`` with piped stdout; the context owns the child."""

        ...

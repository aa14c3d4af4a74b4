"""`ProcessRunner` sobre subprocess.

Por qué dos modos:
- `run` hereda stdin/stdout/stderr: git y el pager de man se comportan como
  si se lanzaran directamente.
- `stream` entuba solo stdout para reenviar cada línea en cuanto llega;
  stderr sigue en la terminal.

Nota:
- La salida se decodifica como UTF-8 con reemplazo: un byte inválido de
  makepkg no puede cortar (ni matar) un build en curso.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from baur.core.errors import SubprocessSpawnError
from baur.core.interfaces.process import ProcessRunner, ProcessStream

logger = logging.getLogger(__name__)


class PipedProcessStream(ProcessStream):
    """Lines of a running child's stdout, readable exactly once."""

    def __init__(self, proc: subprocess.Popen[str]) -> None:
        self._proc = proc
        self._consumed = False
        self.returncode: int | None = None

    def __iter__(self) -> Iterator[str]:
        if self._consumed:
            raise RuntimeError("process output can only be iterated once")
        self._consumed = True
        return self._lines()

    def _lines(self) -> Iterator[str]:
        assert self._proc.stdout is not None
        for line in self._proc.stdout:
            yield line.rstrip("\n")
        self.returncode = self._proc.wait()

    def finish(self) -> int:
        """Reap the child; kill it first if its output was not drained."""

        if self._proc.poll() is None and self.returncode is None:
            self._proc.kill()
        if self._proc.stdout is not None:
            self._proc.stdout.close()
        self.returncode = self._proc.wait()
        return self.returncode


class SubprocessRunner(ProcessRunner):
    def run(self, argv: Sequence[str], cwd: Path | None = None) -> int:
        logger.debug("run %s (cwd=%s)", list(argv), cwd)
        try:
            completed = subprocess.run(list(argv), cwd=cwd, check=False)
        except OSError as exc:
            raise SubprocessSpawnError(argv, exc.strerror or str(exc)) from exc
        return completed.returncode

    @contextmanager
    def stream(self, argv: Sequence[str], cwd: Path | None = None) -> Iterator[PipedProcessStream]:
        logger.debug("stream %s (cwd=%s)", list(argv), cwd)
        try:
            proc = subprocess.Popen(
                list(argv),
                cwd=cwd,
                stdout=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            raise SubprocessSpawnError(argv, exc.strerror or str(exc)) from exc

        output = PipedProcessStream(proc)
        try:
            yield output
        finally:
            output.finish()

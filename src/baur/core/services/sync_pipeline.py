"""Orquestación de `-S` (synchronize).

Por qué aquí:
- Es el único flujo con control real: escanear flags, buscar en el AUR o
  resolver el target a exactamente un paquete, mostrarlo, pedir
  consentimiento, clonar la receta en la caché y lanzar el build con su
  salida reenviada línea a línea.
- Los efectos de UI (imprimir, preguntar) llegan por `SyncHooks`, así el
  pipeline sirve igual para la CLI que para los tests.
- Los errores se lanzan, nunca se tragan; la CLI decide cómo reportarlos.

Limitaciones conocidas:
- No hay lock sobre la caché: dos ejecuciones clonando el mismo paquete a
  la vez pueden pisarse.
- Un clon interrumpido a medias queda en disco y la siguiente ejecución lo
  reutiliza tal cual.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from baur.core.config import AppSettings
from baur.core.domain.arguments import ParsedArguments
from baur.core.domain.models import PackageRecord
from baur.core.errors import (
    AcquisitionError,
    BuildError,
    MissingTargetError,
    MultiplePackagesFoundError,
    NoPackagesFoundError,
    UserAbort,
)
from baur.core.interfaces.process import ProcessRunner
from baur.core.interfaces.repository import PackageRepository

logger = logging.getLogger(__name__)

SEARCH_FLAG = "s"
REFRESH_FLAG = "y"
NOCONFIRM_OPTION = "noconfirm"


class SyncOutcome(str, Enum):
    SEARCHED = "searched"
    NOTHING_TO_DO = "nothing-to-do"
    INSTALLED = "installed"


@dataclass(frozen=True)
class SyncOptions:
    """Result of scanning the `-S` flags."""

    search: bool = False
    noconfirm: bool = False


@dataclass
class SyncHooks:
    """Optional callbacks for UI layers."""

    show_results: Callable[[Sequence[PackageRecord]], None] | None = None
    show_package: Callable[[PackageRecord], None] | None = None
    confirm: Callable[[PackageRecord], bool] | None = None
    notice: Callable[[str], None] | None = None
    output_line: Callable[[str], None] | None = None


@dataclass
class SyncPipeline:
    """Drives one `-S` invocation from flags to a finished build."""

    settings: AppSettings
    repository: PackageRepository
    runner: ProcessRunner
    hooks: SyncHooks = field(default_factory=SyncHooks)

    def execute(self, args: ParsedArguments) -> SyncOutcome:
        options = scan_flags(args)
        if options.search:
            return self.search(args.target)
        return self.install(args.target, noconfirm=options.noconfirm)

    def search(self, fragment: str | None) -> SyncOutcome:
        # Searching for nothing is a silent no-op.
        if not fragment:
            return SyncOutcome.NOTHING_TO_DO
        results = self.repository.search_by_fragment(fragment)
        if self.hooks.show_results:
            self.hooks.show_results(results)
        return SyncOutcome.SEARCHED

    def install(self, target: str | None, *, noconfirm: bool = False) -> SyncOutcome:
        if not target:
            raise MissingTargetError()

        package = self.resolve(target)
        if self.hooks.show_package:
            self.hooks.show_package(package)

        if not noconfirm and not self._confirm(package):
            raise UserAbort()

        package_dir = self.acquire(package)
        self.build(package_dir)
        return SyncOutcome.INSTALLED

    def resolve(self, target: str) -> PackageRecord:
        results = self.repository.lookup_by_name(target)
        if not results:
            raise NoPackagesFoundError(target)
        if len(results) > 1:
            raise MultiplePackagesFoundError(target, [r.name for r in results])
        return results[0]

    def cache_root(self) -> Path:
        root = self.settings.resolved_cache_dir()
        root.mkdir(parents=True, exist_ok=True)
        return root

    def acquire(self, package: PackageRecord) -> Path:
        """Clone the package recipe into the cache, reusing an existing clone."""

        root = self.cache_root()
        package_dir = root / package.name
        if package_dir.exists():
            logger.info("Reusing %s", package_dir)
            self._notice("Package already exists in cache")
            return package_dir

        repo_url = f"{self.settings.aur_base_url.rstrip('/')}/{package.name}.git"
        argv = [self.settings.git_command, "clone", repo_url, package.name]
        returncode = self.runner.run(argv, cwd=root)
        if returncode != 0:
            raise AcquisitionError(argv, returncode)
        return package_dir

    def build(self, package_dir: Path) -> None:
        argv = [self.settings.build_command, *self.settings.build_flags]
        with self.runner.stream(argv, cwd=package_dir) as output:
            for line in output:
                if self.hooks.output_line:
                    self.hooks.output_line(line)
        if output.returncode != 0:
            raise BuildError(argv, output.returncode if output.returncode is not None else -1)

    def _confirm(self, package: PackageRecord) -> bool:
        if self.hooks.confirm is None:
            return False
        return self.hooks.confirm(package)

    def _notice(self, message: str) -> None:
        if self.hooks.notice:
            self.hooks.notice(message)


def scan_flags(args: ParsedArguments) -> SyncOptions:
    """Scan the `-S` flags in order; the search flag wins as soon as it is seen."""

    noconfirm = args.has_option(NOCONFIRM_OPTION)

    for flag in args.operation_flags:
        if flag == SEARCH_FLAG:
            return SyncOptions(search=True, noconfirm=noconfirm)
        if flag == REFRESH_FLAG:
            # Recognised, but there is no local index to refresh.
            logger.debug("Ignoring refresh flag '%s'", flag)
            continue
        logger.warning("Ignoring unknown flag '%s'", flag)

    return SyncOptions(search=False, noconfirm=noconfirm)

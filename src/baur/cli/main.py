"""Entrypoint CLI de baur.

Por qué un único comando con argumentos crudos:
- La interfaz imita a pacman (`baur -<op><flags> [target] [--opciones]`) y
  tokens como `-Ss` o `-h` no son opciones de Click: la lista entera pasa
  tal cual a `parse_arguments`.
- Solo `-S` está implementado; cualquier otra operación (o ninguna) imprime
  su etiqueta y muestra la página de manual.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import ExitStack

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from baur.adapters.aur_client import AurClient
from baur.adapters.process_runner import SubprocessRunner
from baur.cli.ui_components import (
    confirm_install,
    print_error,
    print_package,
    print_search_results,
)
from baur.core.config import AppSettings
from baur.core.domain.arguments import ParsedArguments, parse_arguments
from baur.core.domain.models import PackageRecord
from baur.core.errors import BaurError, ParseError, UserAbort
from baur.core.interfaces.process import ProcessRunner
from baur.core.interfaces.repository import PackageRepository
from baur.core.logging_config import setup_logging
from baur.core.services.sync_pipeline import SyncHooks, SyncPipeline

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)

_console = Console()

SYNC_OPERATION = "S"

OPERATION_LABELS: dict[str, str] = {
    "D": "Database operation",
    "Q": "Querying packages",
    "R": "Removing packages",
    "S": "Synchronizing packages",
    "T": "Testing dependencies",
    "U": "Upgrading packages",
    "F": "Querying files",
    "V": "Display version",
    "h": "Display help",
}


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
    help="Install AUR packages with a pacman-like interface.",
)
def baur(ctx: typer.Context) -> None:
    raise typer.Exit(dispatch(list(ctx.args)))


def dispatch(
    argv: Sequence[str],
    *,
    settings: AppSettings | None = None,
    repository: PackageRepository | None = None,
    runner: ProcessRunner | None = None,
) -> int:
    """Parse ``argv``, route the operation and return the process exit code."""

    try:
        args = parse_arguments(argv)
    except ParseError as exc:
        print_error(_console, str(exc))
        return exc.exit_code

    if settings is None:
        try:
            settings = AppSettings()
        except ValidationError as exc:
            print_error(_console, f"invalid configuration: {_describe(exc)}")
            return 1
    setup_logging("DEBUG" if args.has_option("debug") else settings.log_level)
    runner = runner or SubprocessRunner()

    if args.operation == SYNC_OPERATION:
        return synchronize(args, settings=settings, repository=repository, runner=runner)
    return show_manual(args, settings=settings, runner=runner)


def synchronize(
    args: ParsedArguments,
    *,
    settings: AppSettings,
    runner: ProcessRunner,
    repository: PackageRepository | None = None,
) -> int:
    logger.debug(OPERATION_LABELS[SYNC_OPERATION])
    hooks = SyncHooks(
        show_results=lambda records: print_search_results(_console, records),
        show_package=lambda record: print_package(_console, record),
        confirm=_confirm,
        notice=lambda message: _console.print(Text(message)),
        output_line=lambda line: _console.out(line, highlight=False),
    )
    try:
        with ExitStack() as stack:
            if repository is None:
                repository = stack.enter_context(AurClient(settings))
            outcome = SyncPipeline(settings=settings, repository=repository, runner=runner, hooks=hooks).execute(args)
    except UserAbort as exc:
        _console.print(str(exc))
        return exc.exit_code
    except BaurError as exc:
        print_error(_console, str(exc))
        return exc.exit_code
    logger.debug("sync finished: %s", outcome.value)
    return 0


def show_manual(args: ParsedArguments, *, settings: AppSettings, runner: ProcessRunner) -> int:
    if args.operation is None:
        label = "No operation provided"
    else:
        label = OPERATION_LABELS.get(args.operation, "Invalid operation")
    _console.print(Text(label))
    try:
        returncode = runner.run(["man", settings.manual_page])
    except BaurError as exc:
        print_error(_console, str(exc))
        return 1
    if returncode != 0:
        print_error(_console, f"unable to display the manual page for '{settings.manual_page}'")
        return 1
    return 0


def _confirm(record: PackageRecord) -> bool:
    try:
        return confirm_install(record)
    except typer.Abort as exc:
        # Ctrl-C or EOF at the prompt; nothing has been cloned yet.
        raise UserAbort(exit_code=130) from exc


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"BAUR_{str(err['loc'][0]).upper()}: {err['msg']}" if err["loc"] else err["msg"] for err in exc.errors()
    )


def run() -> None:
    app()

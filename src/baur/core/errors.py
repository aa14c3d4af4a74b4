"""Taxonomía de errores compartida por el parser, el cliente AUR y el pipeline.

Por qué un `exit_code` por clase:
- La CLI traduce cualquier `BaurError` a mensaje + código sin casos especiales.
- "No packages found", "Multiple packages found" y un "no" en el prompt son
  resultados normales: salen con 0.
"""

from __future__ import annotations

from collections.abc import Sequence


class BaurError(Exception):
    """Base class for all user-facing errors."""

    exit_code: int = 1


class ParseError(BaurError):
    """The argument list could not be split into operation/flags/target."""


class MissingTargetError(BaurError):
    def __init__(self) -> None:
        super().__init__("no targets specified (use -h for help)")


class RepositoryError(BaurError):
    """Failure talking to the remote package index."""


class NetworkError(RepositoryError):
    pass


class NetworkTimeoutError(NetworkError):
    pass


class DecodeError(RepositoryError):
    pass


class RemoteError(RepositoryError):
    """The index answered, but with an RPC error payload."""


class ResolutionError(BaurError):
    exit_code = 0


class NoPackagesFoundError(ResolutionError):
    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__("No packages found")


class MultiplePackagesFoundError(ResolutionError):
    def __init__(self, target: str, names: Sequence[str]) -> None:
        self.target = target
        self.names = list(names)
        super().__init__("Multiple packages found")


class SubprocessSpawnError(BaurError):
    def __init__(self, argv: Sequence[str], reason: str) -> None:
        self.argv = list(argv)
        super().__init__(f"failed to run '{argv[0]}': {reason}")


class SubprocessExitError(BaurError):
    action = "command"

    def __init__(self, argv: Sequence[str], returncode: int) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"{self.action} failed: '{' '.join(self.argv)}' exited with status {returncode}")


class AcquisitionError(SubprocessExitError):
    action = "Failed to clone package"


class BuildError(SubprocessExitError):
    action = "Failed to build package"


class UserAbort(BaurError):
    exit_code = 0

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        super().__init__("Aborted")

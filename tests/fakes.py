"""
In-memory fakes for the package repository and the process runner.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from baur.core.domain.models import PackageRecord


def make_record(name: str = "vim", version: str | None = "9.0", description: str | None = "Editor") -> PackageRecord:
    return PackageRecord(Name=name, Version=version, Description=description)


class FakeRepository:
    """Canned answers for `lookup_by_name` / `search_by_fragment`."""

    def __init__(
        self,
        info: Sequence[PackageRecord] = (),
        search: Sequence[PackageRecord] = (),
    ) -> None:
        self.info = list(info)
        self.search = list(search)
        self.calls: list[tuple[str, str]] = []

    def __enter__(self) -> "FakeRepository":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def lookup_by_name(self, name: str) -> list[PackageRecord]:
        self.calls.append(("info", name))
        return list(self.info)

    def search_by_fragment(self, fragment: str) -> list[PackageRecord]:
        self.calls.append(("search", fragment))
        return list(self.search)


@dataclass
class FakeStream:
    lines: list[str]
    final_code: int
    returncode: int | None = None

    def __iter__(self) -> Iterator[str]:
        for line in self.lines:
            yield line
        self.returncode = self.final_code


@dataclass
class FakeRunner:
    """Records every command; `run` and `stream` return configured results."""

    run_codes: dict[str, int] = field(default_factory=dict)
    stream_lines: list[str] = field(default_factory=lambda: ["==> Making package: vim 9.0", "==> Finished"])
    stream_code: int = 0
    create_dirs: bool = True
    calls: list[tuple[str, list[str], Path | None]] = field(default_factory=list)

    def run(self, argv: Sequence[str], cwd: Path | None = None) -> int:
        argv = list(argv)
        self.calls.append(("run", argv, cwd))
        code = self.run_codes.get(argv[0], 0)
        # Emulate `git clone <url> <dir>` creating the checkout.
        if code == 0 and self.create_dirs and argv[1:2] == ["clone"] and cwd is not None:
            (cwd / argv[-1]).mkdir(parents=True, exist_ok=True)
        return code

    @contextmanager
    def stream(self, argv: Sequence[str], cwd: Path | None = None) -> Iterator[FakeStream]:
        self.calls.append(("stream", list(argv), cwd))
        yield FakeStream(list(self.stream_lines), self.stream_code)

    def commands(self) -> list[str]:
        return [argv[0] for _, argv, _ in self.calls]



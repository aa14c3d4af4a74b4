"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from baur.core.config import AppSettings
from tests.fakes import FakeRunner


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Cache root that does not exist yet."""
    return tmp_path / "cache" / "baur"


@pytest.fixture
def settings(cache_dir: Path) -> AppSettings:
    return AppSettings(_env_file=None, cache_dir=cache_dir)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()

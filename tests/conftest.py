"""Pytest configuration for casdb test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_CAS_ENV_VARS = ("CAS_DATA_ROOT", "CAS_HASH_ALGORITHM", "CAS_TABLE_BACKEND")


def pytest_sessionstart() -> None:
    """Put the src layout on sys.path so tests import uninstalled modules."""
    src_path = Path(__file__).resolve().parent.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_cas_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from CAS_* variables set in the developer shell."""
    for name in _CAS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import CasConfig
from core.errors import CasConfigError


def test_from_env_reads_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve data root from environment."""
    monkeypatch.setenv("CAS_DATA_ROOT", "./.tmp-casdb")

    config = CasConfig.from_env()

    assert config.data_root.name == ".tmp-casdb"
    assert config.data_root.is_absolute()


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to SHA2-256 and the file backend."""
    monkeypatch.delenv("CAS_HASH_ALGORITHM", raising=False)
    monkeypatch.delenv("CAS_TABLE_BACKEND", raising=False)

    config = CasConfig.from_env()

    assert config.hash_algorithm == "sha2-256"
    assert config.table_backend == "file"


def test_from_env_normalizes_values(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept case and whitespace variants."""
    monkeypatch.setenv("CAS_HASH_ALGORITHM", " SHA3-256 ")
    monkeypatch.setenv("CAS_TABLE_BACKEND", "Memory")

    config = CasConfig.from_env()

    assert config.hash_algorithm == "sha3-256"
    assert config.table_backend == "memory"


def test_from_env_raises_for_unknown_algorithm(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unsupported digest algorithm."""
    monkeypatch.setenv("CAS_HASH_ALGORITHM", "md5")

    with pytest.raises(CasConfigError):
        CasConfig.from_env()


def test_from_env_raises_for_unknown_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unsupported table backend."""
    monkeypatch.setenv("CAS_TABLE_BACKEND", "sqlite")

    with pytest.raises(CasConfigError):
        CasConfig.from_env()

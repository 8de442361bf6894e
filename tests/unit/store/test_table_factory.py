"""Unit tests for hash table backend selection."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.addressing import SHA3_256
from core.config import CasConfig
from core.errors import CasConfigError
from store.file_table import FileTable
from store.memory_table import MemoryTable
from store.table_factory import open_table


def test_open_table_builds_file_backend(tmp_path) -> None:
    """File backend should be rooted at a created data root."""
    config = CasConfig(data_root=tmp_path / "data", table_backend="file")

    table = open_table(config)

    assert isinstance(table, FileTable)
    assert table.path == (tmp_path / "data").resolve()


def test_open_table_builds_memory_backend(tmp_path) -> None:
    """Memory backend should not touch the data root."""
    config = CasConfig(data_root=tmp_path / "data", table_backend="memory")

    table = open_table(config)

    assert isinstance(table, MemoryTable)
    assert not (tmp_path / "data").exists()


def test_open_table_applies_hash_algorithm(tmp_path) -> None:
    """Configured digest algorithm should reach the backend."""
    config = CasConfig(data_root=tmp_path, hash_algorithm="sha3-256", table_backend="memory")

    table = open_table(config)

    assert isinstance(table, MemoryTable)
    assert table.algorithm == SHA3_256


def test_open_table_reads_env_when_config_omitted(monkeypatch: pytest.MonkeyPatch) -> None:
    """Omitted config should be read from the environment."""
    monkeypatch.setenv("CAS_TABLE_BACKEND", "memory")

    table = open_table()

    assert isinstance(table, MemoryTable)


def test_open_table_raises_for_unknown_backend(tmp_path) -> None:
    """Unsupported backends should fail with a config error."""
    config = replace(CasConfig(data_root=tmp_path), table_backend="sqlite")

    with pytest.raises(CasConfigError):
        open_table(config)

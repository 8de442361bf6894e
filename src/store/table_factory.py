"""Hash table backend selection.

This module builds the configured storage backend so callers depend
only on the hash table interface.
"""

from __future__ import annotations

from core.addressing import digest_algorithm_by_name
from core.config import CasConfig
from core.constants import FILE_TABLE_BACKEND, MEMORY_TABLE_BACKEND
from core.errors import CasConfigError, CasConstructionError
from core.logging_config import get_logger
from store.file_table import FileTable
from store.hash_table import HashTable
from store.memory_table import MemoryTable

_LOGGER = get_logger(__name__)


def open_table(config: CasConfig | None = None) -> HashTable:
    """Open the hash table backend selected by config.

    Args:
        config: Optional runtime configuration; read from env when omitted.

    Returns:
        Ready-to-use hash table.

    Raises:
        CasConfigError: If backend or digest algorithm is unsupported.
        CasConstructionError: If the file backend root cannot be prepared.
    """
    resolved_config = config or CasConfig.from_env()
    algorithm = digest_algorithm_by_name(resolved_config.hash_algorithm)
    table: HashTable
    if resolved_config.table_backend == FILE_TABLE_BACKEND:
        _ensure_data_root(resolved_config)
        table = FileTable(resolved_config.data_root, algorithm=algorithm)
    elif resolved_config.table_backend == MEMORY_TABLE_BACKEND:
        table = MemoryTable(algorithm=algorithm)
    else:
        raise CasConfigError(
            f"Unsupported table backend '{resolved_config.table_backend}'. "
            f"Use '{FILE_TABLE_BACKEND}' or '{MEMORY_TABLE_BACKEND}'."
        )
    _LOGGER.info(
        "hash_table_opened",
        backend=resolved_config.table_backend,
        hash_algorithm=algorithm.name,
    )
    return table


def _ensure_data_root(config: CasConfig) -> None:
    """Create the configured data root directory if missing."""
    try:
        config.data_root.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise CasConstructionError(
            f"Failed to create data root at {config.data_root}: {error}. "
            "Set CAS_DATA_ROOT to a writable directory."
        ) from error

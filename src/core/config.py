"""Runtime configuration model for casdb.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.addressing import digest_algorithm_by_name
from core.constants import (
    DEFAULT_DATA_ROOT,
    DEFAULT_HASH_ALGORITHM_NAME,
    DEFAULT_TABLE_BACKEND,
    SUPPORTED_TABLE_BACKENDS,
)
from core.errors import CasConfigError


@dataclass(frozen=True)
class CasConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Root directory for the file-backed table.
        hash_algorithm: Multihash name of the digest used for addresses.
        table_backend: Storage backend selected at construction time.
    """

    data_root: Path
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM_NAME
    table_backend: str = DEFAULT_TABLE_BACKEND

    @classmethod
    def from_env(cls) -> "CasConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CasConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("CAS_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        hash_algorithm = os.getenv("CAS_HASH_ALGORITHM", DEFAULT_HASH_ALGORITHM_NAME)
        table_backend = os.getenv("CAS_TABLE_BACKEND", DEFAULT_TABLE_BACKEND)
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            hash_algorithm=_parse_hash_algorithm(hash_algorithm),
            table_backend=_parse_table_backend(table_backend),
        )


def _parse_hash_algorithm(raw_value: str) -> str:
    """Validate the digest algorithm environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized algorithm name.

    Raises:
        CasConfigError: If the name is not a known digest algorithm.
    """
    return digest_algorithm_by_name(raw_value.strip().lower()).name


def _parse_table_backend(raw_value: str) -> str:
    """Validate the table backend environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized backend name.

    Raises:
        CasConfigError: If the backend is unsupported.
    """
    backend = raw_value.strip().lower()
    if backend not in SUPPORTED_TABLE_BACKENDS:
        raise CasConfigError(
            "Invalid CAS_TABLE_BACKEND value: "
            f"expected one of {', '.join(SUPPORTED_TABLE_BACKENDS)}, got '{raw_value}'. "
            "Set CAS_TABLE_BACKEND to a supported backend."
        )
    return backend

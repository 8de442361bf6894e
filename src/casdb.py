"""Public SDK surface for casdb.

This module provides a stable import path for storage users.
It re-exports the hash table backends and typed content models.
"""

from __future__ import annotations

from core.addressable import AddressableContent
from core.addressing import (
    DEFAULT_DIGEST_ALGORITHM,
    SHA1,
    SHA2_256,
    SHA2_512,
    SHA3_256,
    SHA3_512,
    Address,
    Content,
    DigestAlgorithm,
    address_from_content,
    content_matches_address,
    digest_algorithm_by_name,
    is_valid_address,
    supported_digest_algorithms,
)
from core.config import CasConfig
from core.entry import Entry
from core.entry_meta import EntryMeta
from core.errors import (
    CasConfigError,
    CasConstructionError,
    CasDecodeError,
    CasEncodeError,
    CasError,
    CasIoError,
)
from store.file_table import FileTable
from store.hash_table import HashTable
from store.memory_table import MemoryTable
from store.table_factory import open_table

__all__ = [
    "Address",
    "AddressableContent",
    "CasConfig",
    "CasConfigError",
    "CasConstructionError",
    "CasDecodeError",
    "CasEncodeError",
    "CasError",
    "CasIoError",
    "Content",
    "DEFAULT_DIGEST_ALGORITHM",
    "DigestAlgorithm",
    "Entry",
    "EntryMeta",
    "FileTable",
    "HashTable",
    "MemoryTable",
    "SHA1",
    "SHA2_256",
    "SHA2_512",
    "SHA3_256",
    "SHA3_512",
    "address_from_content",
    "content_matches_address",
    "digest_algorithm_by_name",
    "is_valid_address",
    "open_table",
    "supported_digest_algorithms",
]

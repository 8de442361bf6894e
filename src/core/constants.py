"""Core constants used across casdb modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in storage logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".casdb")
ENTRIES_TABLE_NAME = "entries"
METAS_TABLE_NAME = "metas"
CONTENT_FILE_SUFFIX = ".json"
CONTENT_ENCODING = "utf-8"
DEFAULT_HASH_ALGORITHM_NAME = "sha2-256"
FILE_TABLE_BACKEND = "file"
MEMORY_TABLE_BACKEND = "memory"
DEFAULT_TABLE_BACKEND = FILE_TABLE_BACKEND
SUPPORTED_TABLE_BACKENDS = (FILE_TABLE_BACKEND, MEMORY_TABLE_BACKEND)

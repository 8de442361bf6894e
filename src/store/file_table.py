"""File-backed hash table.

This module stores entries and metas as one JSON file per address under
a root directory with one subdirectory per logical table.
"""

from __future__ import annotations

from enum import Enum
import os
from pathlib import Path

from core.addressable import AddressableContent
from core.addressing import (
    DEFAULT_DIGEST_ALGORITHM,
    Address,
    Content,
    DigestAlgorithm,
    is_valid_address,
)
from core.constants import (
    CONTENT_ENCODING,
    CONTENT_FILE_SUFFIX,
    ENTRIES_TABLE_NAME,
    METAS_TABLE_NAME,
)
from core.entry import Entry
from core.entry_meta import EntryMeta
from core.errors import CasConstructionError, CasDecodeError, CasIoError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class Table(Enum):
    """Logical tables, each mapped to a subdirectory."""

    ENTRIES = ENTRIES_TABLE_NAME
    METAS = METAS_TABLE_NAME


class FileTable:
    """Hash table persisted to the local filesystem.

    Layout is ``<root>/entries/<address>.json`` and
    ``<root>/metas/<address>.json``, each file holding raw content.
    """

    def __init__(
        self,
        path: str | Path,
        algorithm: DigestAlgorithm = DEFAULT_DIGEST_ALGORITHM,
    ) -> None:
        """Open a table rooted at an existing directory.

        Args:
            path: Root directory of the table.
            algorithm: Digest algorithm used for every address.

        Raises:
            CasConstructionError: If path is not an accessible directory.
        """
        self._path = _resolve_root(Path(path))
        self._algorithm = algorithm
        _LOGGER.info(
            "file_table_opened",
            path=str(self._path),
            hash_algorithm=algorithm.name,
        )

    @property
    def path(self) -> Path:
        """Canonical root directory of this table."""
        return self._path

    @property
    def algorithm(self) -> DigestAlgorithm:
        """Digest algorithm used for addresses."""
        return self._algorithm

    def put_entry(self, entry: Entry) -> None:
        """Store an entry under its own derived address."""
        self._upsert(Table.ENTRIES, entry)

    def entry(self, address: Address) -> Entry | None:
        """Return the entry at an address, or None when absent."""
        content = self._lookup(Table.ENTRIES, address)
        if content is None:
            return None
        return Entry.from_content(content)

    def assert_meta(self, meta: EntryMeta) -> None:
        """Store a meta, replacing any meta with the same entry and attribute."""
        self._upsert(Table.METAS, meta)

    def get_meta(self, address: Address) -> EntryMeta | None:
        """Return the meta at its own address, or None when absent."""
        content = self._lookup(Table.METAS, address)
        if content is None:
            return None
        return EntryMeta.from_content(content)

    def metas_from_entry(self, entry: Entry) -> list[EntryMeta]:
        """Return every meta about an entry in canonical meta order.

        Metas are keyed by entry and attribute, so there is no index from
        entry to metas. Every meta file is read and decoded; query cost
        grows with the total number of stored metas. A corrupt meta file
        fails the whole query rather than being skipped.

        Args:
            entry: Entry whose metas are requested.

        Returns:
            Sorted matching metas.

        Raises:
            CasIoError: If the metas directory cannot be read.
            CasDecodeError: If a file name or its content does not parse.
        """
        entry_address = entry.address(self._algorithm)
        metas_dir = self._dir(Table.METAS)
        meta_paths = _scan_content_files(metas_dir)
        seen: set[Address] = set()
        metas: list[EntryMeta] = []
        for meta_path in meta_paths:
            address = _address_from_stem(meta_path)
            # nested copies share a stem with the top-level file
            if address in seen:
                continue
            seen.add(address)
            meta = self.get_meta(address)
            if meta is not None and meta.entry_address == entry_address:
                metas.append(meta)
        metas.sort()
        _LOGGER.debug(
            "meta_scan_completed",
            entry_address=entry_address,
            scanned=len(meta_paths),
            matched=len(metas),
        )
        return metas

    def _dir(self, table: Table) -> Path:
        """Return the directory for a table, creating it when missing."""
        table_dir = self._path / table.value
        try:
            table_dir.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise CasIoError(
                f"Failed to create table directory at {table_dir}: {error}. "
                "Check permissions on the table root."
            ) from error
        return table_dir

    def _content_path(self, table: Table, address: Address) -> Path:
        return self._dir(table) / f"{address}{CONTENT_FILE_SUFFIX}"

    def _upsert(self, table: Table, item: AddressableContent) -> None:
        """Write item content to its address, replacing any existing file."""
        content_path = self._content_path(table, item.address(self._algorithm))
        try:
            content_path.write_text(item.content(), encoding=CONTENT_ENCODING)
        except OSError as error:
            raise CasIoError(
                f"Failed to write content at {content_path}: {error}. "
                "Check disk space and permissions on the table root."
            ) from error

    def _lookup(self, table: Table, address: Address) -> Content | None:
        """Return stored content for an address, or None when absent.

        Strings that are not canonical addresses can never have been
        written, so they are absent without touching the filesystem.
        """
        if not is_valid_address(address):
            return None
        content_path = self._content_path(table, address)
        try:
            return content_path.read_text(encoding=CONTENT_ENCODING)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            return None
        except UnicodeDecodeError as error:
            raise CasDecodeError(
                f"Content at {content_path} is not valid {CONTENT_ENCODING} text."
            ) from error
        except OSError as error:
            raise CasIoError(f"Failed to read content at {content_path}: {error}") from error


def _resolve_root(path: Path) -> Path:
    """Resolve a table root to its canonical accessible directory.

    Args:
        path: Requested root path.

    Returns:
        Canonical absolute directory path.

    Raises:
        CasConstructionError: If the path is missing, not a directory,
            or not readable and writable.
    """
    try:
        canonical = path.expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as error:
        raise CasConstructionError(
            f"Table root {path} could not be resolved: {error}. "
            "Create the directory before opening a table on it."
        ) from error
    if not canonical.is_dir():
        raise CasConstructionError(
            f"Table root {canonical} is not a directory. "
            "Pass a directory path to open a table."
        )
    if not os.access(canonical, os.R_OK | os.W_OK | os.X_OK):
        raise CasConstructionError(
            f"Table root {canonical} is not readable and writable. "
            "Fix directory permissions before opening a table."
        )
    return canonical


def _address_from_stem(meta_path: Path) -> Address:
    """Parse a scanned file name into the address it is stored under."""
    stem = meta_path.name[: -len(CONTENT_FILE_SUFFIX)]
    if not is_valid_address(stem):
        raise CasDecodeError(
            f"Meta file {meta_path} is not named by a valid address. "
            "Remove foreign files from the metas directory."
        )
    return Address(stem)


def _scan_content_files(table_dir: Path) -> list[Path]:
    """Return content files under a table directory in sorted path order."""
    try:
        return sorted(
            path for path in table_dir.rglob(f"*{CONTENT_FILE_SUFFIX}") if path.is_file()
        )
    except OSError as error:
        raise CasIoError(
            f"Failed to scan table directory at {table_dir}: {error}. "
            "Check permissions on the table root."
        ) from error

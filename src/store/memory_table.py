"""In-memory hash table.

This module keeps entries and metas in process memory with the same
observable semantics as the file-backed table. Content is stored in
serialized form so stored values never alias caller objects.
"""

from __future__ import annotations

from core.addressing import DEFAULT_DIGEST_ALGORITHM, Address, Content, DigestAlgorithm
from core.entry import Entry
from core.entry_meta import EntryMeta


class MemoryTable:
    """Hash table held in process memory."""

    def __init__(self, algorithm: DigestAlgorithm = DEFAULT_DIGEST_ALGORITHM) -> None:
        self._algorithm = algorithm
        self._entries: dict[Address, Content] = {}
        self._metas: dict[Address, Content] = {}

    @property
    def algorithm(self) -> DigestAlgorithm:
        """Digest algorithm used for addresses."""
        return self._algorithm

    def put_entry(self, entry: Entry) -> None:
        """Store an entry under its own derived address."""
        self._entries[entry.address(self._algorithm)] = entry.content()

    def entry(self, address: Address) -> Entry | None:
        """Return the entry at an address, or None when absent."""
        content = self._entries.get(address)
        if content is None:
            return None
        return Entry.from_content(content)

    def assert_meta(self, meta: EntryMeta) -> None:
        """Store a meta, replacing any meta with the same entry and attribute."""
        self._metas[meta.address(self._algorithm)] = meta.content()

    def get_meta(self, address: Address) -> EntryMeta | None:
        """Return the meta at its own address, or None when absent."""
        content = self._metas.get(address)
        if content is None:
            return None
        return EntryMeta.from_content(content)

    def metas_from_entry(self, entry: Entry) -> list[EntryMeta]:
        """Return every meta about an entry in canonical meta order."""
        entry_address = entry.address(self._algorithm)
        metas = [EntryMeta.from_content(content) for content in self._metas.values()]
        return sorted(meta for meta in metas if meta.entry_address == entry_address)

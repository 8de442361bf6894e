"""Hash table storage contract.

This module declares the operations every storage backend provides.
Backends are selected at construction time and used only through
this interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.addressing import Address
from core.entry import Entry
from core.entry_meta import EntryMeta


@runtime_checkable
class HashTable(Protocol):
    """Storage operations keyed by content address.

    Callers must serialize mutating calls; backends provide no locking.
    """

    def put_entry(self, entry: Entry) -> None:
        """Store an entry under its own derived address.

        Raises:
            CasIoError: If persistence fails.
        """
        ...

    def entry(self, address: Address) -> Entry | None:
        """Return the entry at an address, or None when absent.

        Raises:
            CasIoError: If reading fails.
            CasDecodeError: If stored content is corrupt.
        """
        ...

    def assert_meta(self, meta: EntryMeta) -> None:
        """Store a meta, replacing any meta with the same entry and attribute.

        Raises:
            CasIoError: If persistence fails.
        """
        ...

    def get_meta(self, address: Address) -> EntryMeta | None:
        """Return the meta at its own address, or None when absent.

        Raises:
            CasIoError: If reading fails.
            CasDecodeError: If stored content is corrupt.
        """
        ...

    def metas_from_entry(self, entry: Entry) -> list[EntryMeta]:
        """Return every meta about an entry in canonical meta order.

        Raises:
            CasIoError: If reading fails.
            CasDecodeError: If any stored meta is corrupt.
        """
        ...

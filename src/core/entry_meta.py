"""Entity-attribute-value metadata about stored entries.

This module defines the assertion record attached to entries. A meta is
addressed by its entry and attribute only, so a later assertion of the
same attribute on the same entry replaces the earlier one.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.addressing import Address, Content, DigestAlgorithm, address_from_content
from core.content_json import decode_fields, encode_fields

_ENTRY_META_FIELDS = ("entry_address", "attribute", "value", "source")


@dataclass(frozen=True, kw_only=True)
class EntryMeta:
    """EAV assertion made by an agent about an entry.

    Metas sort by entry address, then attribute, then value. The source
    takes part in equality but not in ordering or addressing.

    Attributes:
        entry_address: Address of the entry the assertion is about.
        attribute: Name of the meta attribute.
        value: Value of the meta attribute.
        source: Identifier of the asserting agent.
    """

    entry_address: Address
    attribute: str
    value: str
    source: str

    @classmethod
    def new(cls, source: str, entry_address: str, attribute: str, value: str) -> "EntryMeta":
        """Build a meta asserted by an agent about an entry.

        Args:
            source: Identifier of the asserting agent.
            entry_address: Address of the described entry.
            attribute: Attribute name.
            value: Attribute value.

        Returns:
            New meta assertion.
        """
        return cls(
            entry_address=Address(entry_address),
            attribute=attribute,
            value=value,
            source=source,
        )

    @staticmethod
    def make_address(
        entry_address: str,
        attribute: str,
        algorithm: DigestAlgorithm | None = None,
    ) -> Address:
        """Derive the storage address for an entry and attribute pair.

        Args:
            entry_address: Address of the described entry.
            attribute: Attribute name.
            algorithm: Digest algorithm; the default algorithm when omitted.

        Returns:
            Address shared by every meta with this entry and attribute.
        """
        return address_from_content(entry_address + attribute, algorithm)

    def address(self, algorithm: DigestAlgorithm | None = None) -> Address:
        """Derive the storage address of this meta."""
        return EntryMeta.make_address(self.entry_address, self.attribute, algorithm)

    def content(self) -> Content:
        """Serialize this meta to compact JSON in field order."""
        return encode_fields(
            {
                "entry_address": self.entry_address,
                "attribute": self.attribute,
                "value": self.value,
                "source": self.source,
            }
        )

    @classmethod
    def from_content(cls, content: Content) -> "EntryMeta":
        """Rebuild a meta from stored content.

        Raises:
            CasDecodeError: If the content is not a valid meta payload.
        """
        fields = decode_fields(content, "EntryMeta", _ENTRY_META_FIELDS)
        return cls(
            entry_address=Address(fields["entry_address"]),
            attribute=fields["attribute"],
            value=fields["value"],
            source=fields["source"],
        )

    def sort_key(self) -> tuple[str, str, str]:
        """Return the ordering key (entry address, attribute, value)."""
        return (self.entry_address, self.attribute, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EntryMeta):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, EntryMeta):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EntryMeta):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, EntryMeta):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

"""Entry record type.

This module defines the immutable application record stored by address.
An entry has no identity beyond its content.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.addressing import Address, Content, DigestAlgorithm, address_from_content
from core.content_json import decode_fields, encode_fields

_ENTRY_FIELDS = ("entry_type", "value")


@dataclass(frozen=True)
class Entry:
    """Immutable unit of application data.

    Attributes:
        entry_type: Application-defined type name.
        value: Serialized application payload.
    """

    entry_type: str
    value: str

    def address(self, algorithm: DigestAlgorithm | None = None) -> Address:
        """Derive the address of this entry from its content."""
        return address_from_content(self.content(), algorithm)

    def content(self) -> Content:
        """Serialize this entry to compact JSON."""
        return encode_fields({"entry_type": self.entry_type, "value": self.value})

    @classmethod
    def from_content(cls, content: Content) -> "Entry":
        """Rebuild an entry from stored content.

        Raises:
            CasDecodeError: If the content is not a valid entry payload.
        """
        fields = decode_fields(content, "Entry", _ENTRY_FIELDS)
        return cls(entry_type=fields["entry_type"], value=fields["value"])

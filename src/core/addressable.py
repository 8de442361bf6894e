"""Addressable content capability.

This module declares the contract every stored type satisfies: derive
its own address from its content and rebuild itself from that content.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from core.addressing import Address, Content, DigestAlgorithm

AddressableT = TypeVar("AddressableT", bound="AddressableContent")


@runtime_checkable
class AddressableContent(Protocol):
    """Capability of a value stored by content address.

    Implementations uphold the round-trip law
    ``type(x).from_content(x.content()) == x``.
    """

    def address(self, algorithm: DigestAlgorithm | None = None) -> Address:
        """Derive the storage address of this value.

        Args:
            algorithm: Digest algorithm; the default algorithm when omitted.

        Returns:
            Deterministic content-derived address.
        """
        ...

    def content(self) -> Content:
        """Serialize this value to its canonical form."""
        ...

    @classmethod
    def from_content(cls: type[AddressableT], content: Content) -> AddressableT:
        """Rebuild a value from stored content.

        Raises:
            CasDecodeError: If the content does not parse.
        """
        ...

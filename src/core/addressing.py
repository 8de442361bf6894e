"""Content address derivation.

This module turns content payloads into canonical textual addresses.
Digests are framed as multihashes and rendered with base58btc, so the
algorithm used is recoverable from every address it produced.
"""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
from typing import NewType

import base58

from core.constants import CONTENT_ENCODING, DEFAULT_HASH_ALGORITHM_NAME
from core.errors import CasConfigError, CasEncodeError

Address = NewType("Address", str)
Content = str


@dataclass(frozen=True)
class DigestAlgorithm:
    """Named digest function used for address derivation.

    Attributes:
        name: Multihash registry name, for example sha2-256.
        code: Multihash function code prefixed to each digest.
        hashlib_name: Constructor name understood by hashlib.new.
    """

    name: str
    code: int
    hashlib_name: str

    def digest(self, payload: bytes) -> bytes:
        """Return the raw digest of a payload."""
        return hashlib.new(self.hashlib_name, payload).digest()

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return hashlib.new(self.hashlib_name).digest_size


SHA1 = DigestAlgorithm(name="sha1", code=0x11, hashlib_name="sha1")
SHA2_256 = DigestAlgorithm(name="sha2-256", code=0x12, hashlib_name="sha256")
SHA2_512 = DigestAlgorithm(name="sha2-512", code=0x13, hashlib_name="sha512")
SHA3_512 = DigestAlgorithm(name="sha3-512", code=0x14, hashlib_name="sha3_512")
SHA3_256 = DigestAlgorithm(name="sha3-256", code=0x16, hashlib_name="sha3_256")

_ALGORITHMS_BY_NAME = {
    algorithm.name: algorithm for algorithm in (SHA1, SHA2_256, SHA2_512, SHA3_512, SHA3_256)
}
_ALGORITHMS_BY_CODE = {algorithm.code: algorithm for algorithm in _ALGORITHMS_BY_NAME.values()}

DEFAULT_DIGEST_ALGORITHM = _ALGORITHMS_BY_NAME[DEFAULT_HASH_ALGORITHM_NAME]


def supported_digest_algorithms() -> tuple[str, ...]:
    """Return names of the built-in digest algorithms."""
    return tuple(sorted(_ALGORITHMS_BY_NAME))


def digest_algorithm_by_name(name: str) -> DigestAlgorithm:
    """Resolve a digest algorithm from its multihash name.

    Args:
        name: Multihash registry name.

    Returns:
        Matching digest algorithm.

    Raises:
        CasConfigError: If the name is unknown.
    """
    algorithm = _ALGORITHMS_BY_NAME.get(name)
    if algorithm is None:
        raise CasConfigError(
            f"Unsupported digest algorithm '{name}'. "
            f"Use one of: {', '.join(supported_digest_algorithms())}."
        )
    return algorithm


def address_from_content(
    content: Content,
    algorithm: DigestAlgorithm | None = None,
) -> Address:
    """Derive the canonical address of a content payload.

    Args:
        content: Serialized content.
        algorithm: Digest algorithm; the default algorithm when omitted.

    Returns:
        Base58btc-encoded multihash of the content.

    Raises:
        CasEncodeError: If content is not encodable as UTF-8.
    """
    digest_algorithm = algorithm or DEFAULT_DIGEST_ALGORITHM
    try:
        payload = content.encode(CONTENT_ENCODING)
    except UnicodeEncodeError as error:
        raise CasEncodeError(
            f"Content is not encodable as {CONTENT_ENCODING}: {error.reason}. "
            "Remove lone surrogates from stored strings."
        ) from error
    digest = digest_algorithm.digest(payload)
    multihash = bytes([digest_algorithm.code, len(digest)]) + digest
    return Address(base58.b58encode(multihash).decode("ascii"))


def is_valid_address(address: str, algorithm: DigestAlgorithm | None = None) -> bool:
    """Return whether a string parses as a canonical address.

    Args:
        address: Candidate address string.
        algorithm: When given, the address must use this algorithm.

    Returns:
        True for a well-formed multihash address.
    """
    if not address:
        return False
    try:
        multihash = base58.b58decode(address)
    except ValueError:
        return False
    if len(multihash) < 2:
        return False
    code, length, digest = multihash[0], multihash[1], multihash[2:]
    known_algorithm = _ALGORITHMS_BY_CODE.get(code)
    if known_algorithm is None or len(digest) != length:
        return False
    if length != known_algorithm.digest_size:
        return False
    if algorithm is not None and algorithm.code != code:
        return False
    return base58.b58encode(multihash).decode("ascii") == address


def content_matches_address(
    content: Content,
    address: str,
    algorithm: DigestAlgorithm | None = None,
) -> bool:
    """Return whether content re-derives the given address."""
    return address_from_content(content, algorithm) == address

"""casdb exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each storage concern raises a specific error type for debuggability.
"""

from __future__ import annotations


class CasError(Exception):
    """Base exception for all casdb failures."""


class CasConfigError(CasError):
    """Raised for invalid runtime configuration or digest selection."""


class CasConstructionError(CasError):
    """Raised when a table root does not resolve to an accessible directory."""


class CasIoError(CasError):
    """Raised for filesystem read, write, and directory failures."""


class CasDecodeError(CasError):
    """Raised when stored content does not parse into the expected type."""


class CasEncodeError(CasError):
    """Raised when content cannot be encoded for hashing or storage."""

"""Storage backends.

This module persists entries and entity metadata by content address.
It provides file-backed and in-memory hash tables behind one interface.
"""

"""Core content-addressing primitives.

This module defines addresses, addressable types, configuration,
logging, and the error hierarchy shared by storage backends.
"""

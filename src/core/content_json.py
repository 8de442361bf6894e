"""Shared JSON content codec for addressable types.

This module centralizes compact JSON encoding and strict decoding.
It is reused by entry and entry-meta serialization.
"""

from __future__ import annotations

import json

from core.addressing import Content
from core.errors import CasDecodeError


def encode_fields(fields: dict[str, str]) -> Content:
    """Encode string fields as compact JSON in insertion order.

    Args:
        fields: Ordered field mapping.

    Returns:
        Canonical JSON content.
    """
    return json.dumps(fields, separators=(",", ":"), ensure_ascii=False)


def decode_fields(content: Content, type_name: str, field_names: tuple[str, ...]) -> dict[str, str]:
    """Decode JSON content into required string fields.

    Args:
        content: Stored JSON content.
        type_name: Target type name used in error messages.
        field_names: Fields that must be present as strings.

    Returns:
        Mapping of the requested fields.

    Raises:
        CasDecodeError: If content is not a JSON object with string fields.
    """
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as error:
        raise CasDecodeError(
            f"Could not parse {type_name} content: {error.msg}. "
            "The stored file is corrupt or was written by another tool."
        ) from error
    if not isinstance(payload, dict):
        raise CasDecodeError(
            f"Could not parse {type_name} content: expected JSON object at top level."
        )
    fields: dict[str, str] = {}
    for field_name in field_names:
        value = payload.get(field_name)
        if not isinstance(value, str):
            raise CasDecodeError(
                f"Could not parse {type_name} content: "
                f"field '{field_name}' is missing or not a string."
            )
        fields[field_name] = value
    return fields

"""Token serialization: JSON round-trip for md0 tokens.

Converts tokens and their metadata to/from JSON-compatible dicts. Useful for:
- Caching tokenized documents
- Handing token streams to tools in other processes
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from md0 import parse
    from md0.serialization import to_json, from_json

    tokens = parse("# Hello")
    json_str = to_json(tokens)
    assert from_json(json_str) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from md0.tokens import (
    METADATA_TYPES,
    TOKEN_TYPES,
    Code,
    Heading,
    HorizontalRule,
    Image,
    Link,
    Metadata,
    Paragraph,
    Token,
)

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Heading": Heading,
    "Paragraph": Paragraph,
    "HorizontalRule": HorizontalRule,
    "Code": Code,
    "Link": Link,
    "Image": Image,
}


def to_dict(node: Token | Metadata) -> dict[str, Any]:
    """Convert a token or metadata entry to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Spans become two-element lists; metadata tuples become lists of dicts.

    Args:
        node: Any md0 token or metadata entry.

    Returns:
        Dict with ``_type`` and all fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, TOKEN_TYPES + METADATA_TYPES):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int
    return value


def from_dict(data: dict[str, Any]) -> Token | Metadata:
    """Reconstruct a token or metadata entry from a dict.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Typed token or metadata entry (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string (a list of token objects).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token sequence from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Token list.

    Raises:
        ValueError: If the JSON isn't a list of tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list of tokens, got {type(raw).__name__}"
        raise ValueError(msg)

    tokens: list[Token] = []
    for item in raw:
        node = from_dict(item)
        if not isinstance(node, TOKEN_TYPES):
            msg = f"Expected a token, got {type(node).__name__}"
            raise ValueError(msg)
        tokens.append(node)  # type: ignore[arg-type]
    return tokens

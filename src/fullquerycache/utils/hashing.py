"""Hashing utilities for cache key generation."""

import hashlib
import json
from collections.abc import Mapping
from typing import Any


def canonicalize(value: Any) -> Any:
    """Return a copy of value with every nested mapping key-sorted.

    Lists keep their order since element position is meaningful.

    Args:
        value: Any JSON-representable value.

    Returns:
        An equivalent structure whose mappings iterate in sorted key order.
    """
    if isinstance(value, Mapping):
        return {str(k): canonicalize(value[k]) for k in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [canonicalize(item) for item in value]
    return value


def canonical_json(value: Any) -> str:
    """Serialize a value to compact, deterministic JSON.

    The top-level mapping keeps its insertion order so callers control
    field order; nested mappings are key-sorted.

    Args:
        value: Any JSON-representable value.

    Returns:
        The compact JSON text.

    Raises:
        TypeError: If the value contains something JSON cannot represent.
        ValueError: If the value contains NaN or infinity.
    """
    if isinstance(value, Mapping):
        ordered = {str(k): canonicalize(v) for k, v in value.items()}
    else:
        ordered = canonicalize(value)
    return json.dumps(
        ordered,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def hash_value(value: Any) -> str:
    """Create a deterministic SHA-256 digest of a value.

    Args:
        value: Any JSON-serializable value.

    Returns:
        The 64 character lowercase hexadecimal digest.
    """
    return hashlib.sha256(canonical_json(value).encode("utf-8")).hexdigest()

"""
Deterministic case identity for records that carry no explicit id.

Records are content-addressed: the fingerprint is a BLAKE3 hash of the
record's canonical JSON serialisation (sorted keys), so the same record always
maps to the same identity regardless of key order.
"""

import base64
from typing import Any, Mapping

import orjson
from blake3 import blake3


def _b3(content: bytes) -> str:
    """
    Generate a BLAKE3 hash of the content, returning a URL-safe base64 string.

    Args:
        content: Bytes to hash

    Returns:
        URL-safe base64 encoded hash (22 characters for 128-bit hash)
    """
    hash_bytes = blake3(content).digest()[:16]  # 128-bit hash
    return base64.urlsafe_b64encode(hash_bytes).decode("ascii").rstrip("=")


_CANONICAL_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS

# orjson only encodes integers in [-2**63, 2**64 - 1]
_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


def _stringify_wide_ints(value: Any) -> Any:
    """Replace integers orjson cannot encode with their decimal strings."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value if _INT_MIN <= value <= _INT_MAX else str(value)
    if isinstance(value, Mapping):
        return {
            (_stringify_wide_ints(k) if isinstance(k, int) else k): _stringify_wide_ints(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_stringify_wide_ints(v) for v in value]
    return value


def fingerprint(record: Any) -> str:
    """Structural fingerprint of a JSON-shaped record with a ``case_`` prefix."""
    try:
        payload = orjson.dumps(record, option=_CANONICAL_OPTIONS, default=str)
    except orjson.JSONEncodeError:
        payload = orjson.dumps(_stringify_wide_ints(record), option=_CANONICAL_OPTIONS, default=str)
    return f"case_{_b3(payload)}"


def case_id(record: Any) -> str:
    """
    Resolve the identity of a record.

    An explicit ``id`` on the record wins; otherwise the structural fingerprint
    of the whole record is used.
    """
    if isinstance(record, Mapping):
        explicit = record.get("id")
        if explicit is not None and explicit != "":
            return str(explicit)
    return fingerprint(record)

"""JSON encode/decode contract for cache payloads and keys."""

import json
from typing import Any

from app.cache.errors import CacheDecodeError, CacheEncodeError
from ramp_client.schemas import dump_params


def encode(value: Any) -> str:
    """Serialize to compact JSON, same text as JSON.stringify.

    Keys are kept in insertion order, never sorted.
    """
    try:
        return json.dumps(dump_params(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise CacheEncodeError(f"Cannot encode {type(value).__name__}: {e}") from e


def decode(text: str) -> Any:
    """Parse cached JSON text."""
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise CacheDecodeError(f"Malformed cache payload: {e}") from e

"""Cache key derivation."""

from typing import Any

from app.cache.codec import encode

KEY_SEPARATOR = "@"


def cache_key(endpoint: str, params: Any = None) -> str:
    """Key for an (endpoint, params) pair.

    ``endpoint`` alone when params is None, otherwise ``endpoint@<json>``.
    Params are not canonicalized: ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}``
    give different keys.
    """
    if params is None:
        return str(endpoint)
    return f"{endpoint}{KEY_SEPARATOR}{encode(params)}"


def key_endpoint(key: str) -> str:
    """Endpoint segment of a key."""
    return key.split(KEY_SEPARATOR, 1)[0]

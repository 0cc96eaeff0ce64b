"""Request cache - keys, store, fetch adapter, invalidation, patching."""

from app.cache.adapter import RequestCacheAdapter, Transport
from app.cache.codec import decode, encode
from app.cache.errors import CacheDecodeError, CacheEncodeError, CacheError
from app.cache.invalidation import CacheInvalidator
from app.cache.keys import cache_key
from app.cache.patcher import TransactionCachePatcher
from app.cache.store import CacheEntry, CacheStore, EntryKind

__all__ = [
    # Keys and codec
    "cache_key",
    "encode",
    "decode",
    # Errors
    "CacheError",
    "CacheDecodeError",
    "CacheEncodeError",
    # Store
    "CacheStore",
    "CacheEntry",
    "EntryKind",
    # Operations
    "RequestCacheAdapter",
    "Transport",
    "CacheInvalidator",
    "TransactionCachePatcher",
]

"""Cache-aware request dispatch."""

from typing import Any, Protocol

from loguru import logger

from app.cache.codec import decode, encode
from app.cache.errors import CacheDecodeError, CacheEncodeError
from app.cache.keys import cache_key
from app.cache.store import CacheStore, kind_for_endpoint
from ramp_client.base import RequestWrapper


class Transport(Protocol):
    async def fetch(self, endpoint: str, params: Any = None) -> Any: ...


class RequestCacheAdapter:
    """Fetches through the store, delegating I/O to the transport.

    Overlapping misses on the same key are not deduplicated: each one calls
    the transport and the last response written wins.
    """

    def __init__(self, store: CacheStore, transport: Transport, wrapper: RequestWrapper | None = None):
        self._store = store
        self._transport = transport
        self._wrapper = wrapper or RequestWrapper()

    @property
    def loading(self) -> bool:
        return self._wrapper.loading

    def _cached(self, key: str) -> tuple[bool, Any]:
        """(hit, value) for a key; undecodable entries count as a miss."""
        entry = self._store.get(key)
        if entry is None:
            return False, None
        try:
            return True, decode(entry.payload)
        except CacheDecodeError as e:
            logger.warning("Ignoring cache entry {}: {}", key, e.message)
            return False, None

    async def fetch_with_cache(self, endpoint: str, params: Any = None) -> Any:
        """Cached value for (endpoint, params), fetching and storing on a miss."""

        async def request():
            key = cache_key(endpoint, params)
            hit, value = self._cached(key)
            if hit:
                logger.debug("Cache hit: {}", key)
                return value

            logger.debug("Cache miss: {}", key)
            result = await self._transport.fetch(endpoint, params)
            try:
                self._store.put(key, encode(result), kind=kind_for_endpoint(endpoint))
            except CacheEncodeError as e:
                logger.warning("Not caching {}: {}", key, e.message)
            return result

        return await self._wrapper.wrapped_request(request)

    async def fetch_without_cache(self, endpoint: str, params: Any = None) -> Any:
        """Always call the transport; the store is neither read nor written."""

        async def request():
            return await self._transport.fetch(endpoint, params)

        return await self._wrapper.wrapped_request(request)

"""Cached fetcher - the cache operations exposed to callers."""

from collections.abc import Iterable
from typing import Any

from loguru import logger

from app.cache import (
    CacheInvalidator,
    CacheStore,
    RequestCacheAdapter,
    TransactionCachePatcher,
    Transport,
)
from ramp_client.base import RequestWrapper


class CachedFetcher:
    """Fetch, invalidation and patching over one shared store."""

    def __init__(
        self,
        store: CacheStore,
        transport: Transport,
        wrapper: RequestWrapper | None = None,
    ):
        self._store = store
        self._adapter = RequestCacheAdapter(store, transport, wrapper)
        self._invalidator = CacheInvalidator(store)
        self._patcher = TransactionCachePatcher(store)
        logger.debug("CachedFetcher initialized")

    @property
    def store(self) -> CacheStore:
        return self._store

    @property
    def loading(self) -> bool:
        return self._adapter.loading

    async def fetch_with_cache(self, endpoint: str, params: Any = None) -> Any:
        return await self._adapter.fetch_with_cache(endpoint, params)

    async def fetch_without_cache(self, endpoint: str, params: Any = None) -> Any:
        return await self._adapter.fetch_without_cache(endpoint, params)

    def clear_cache(self) -> None:
        self._invalidator.clear_cache()

    def clear_cache_by_endpoint(self, endpoints: Iterable[str]) -> list[str]:
        return self._invalidator.clear_cache_by_endpoint(endpoints)

    def update_cache_by_transaction_id(self, transaction_id: str, new_value: bool) -> int:
        return self._patcher.update_cache_by_transaction_id(transaction_id, new_value)

"""Full and endpoint-scoped cache invalidation."""

from collections.abc import Iterable

from loguru import logger

from app.cache.store import CacheStore


class CacheInvalidator:
    """Removes cache entries wholesale or by endpoint prefix."""

    def __init__(self, store: CacheStore):
        self._store = store

    def clear_cache(self) -> None:
        """Replace the whole store with an empty one."""
        self._store.reset()

    def clear_cache_by_endpoint(self, endpoints: Iterable[str]) -> list[str]:
        """Remove every key starting with one of ``endpoints``.

        Matching is a literal prefix test, so an endpoint that prefixes another
        endpoint clears both. Returns the removed keys.
        """
        prefixes = tuple(str(e) for e in endpoints)
        if not prefixes or not self._store.initialized:
            return []

        removed = [key for key in self._store.keys() if key.startswith(prefixes)]
        for key in removed:
            self._store.delete(key)

        logger.info("Cache cleared for {}: {} entries", list(prefixes), len(removed))
        return removed
